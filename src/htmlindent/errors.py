"""Exception classes for htmlindent.

Provides standardized exceptions for error handling throughout htmlindent.
Write failures on the output sink are not wrapped: whatever the sink raises
(usually ``OSError``) reaches the caller unchanged.
"""

from __future__ import annotations


class HtmlIndentError(Exception):
    """Base exception for all htmlindent errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(HtmlIndentError):
    """Error while turning HTML source into a node tree.

    Raised when html5lib fails on the input or produces a DOM node the
    node tree has no counterpart for.
    """

    def __init__(self, message: str, source_name: str | None = None) -> None:
        """Initialize parse error.

        Args:
            message: Error description
            source_name: Name of the input (file name, "<stdin>"), optional
        """
        self.message = message
        self.source_name = source_name

        location = f"{source_name}: " if source_name else ""
        super().__init__(f"{location}{message}")


class RenderError(HtmlIndentError):
    """Error during rendering.

    Raised when the renderer meets a tree it cannot serialize. Output
    written before the failure is left in the sink.
    """

    pass


class InvalidNodeError(RenderError):
    """An error node or an object of unknown node type was rendered."""

    def __init__(self, message: str, node: object = None) -> None:
        self.node = node
        super().__init__(f"html: {message}")


class VoidElementError(RenderError):
    """A void element (``br``, ``img``, ...) has child nodes."""

    def __init__(self, tag: str) -> None:
        """Initialize void element error.

        Args:
            tag: Tag name of the offending element
        """
        self.tag = tag
        super().__init__(f"html: void element <{tag}> has child nodes")


class ConfigError(HtmlIndentError):
    """Invalid formatting configuration."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Option '{option}': {message}")
