"""
htmlindent — HTML pretty-printer built on the HTML5 parsing algorithm

Parses HTML with html5lib and writes it back with consistent indentation and
line breaks. Only whitespace is added: the output reparses to an equivalent
tree for any well-formed input.

Quick Start:
    >>> from htmlindent import format_string
    >>> print(format_string("<ul><li>one<li>two</ul>", indent="  ", fragment=True))
    <BLANKLINE>
    <ul>
      <li>one</li>
      <li>two</li>
    </ul>
    <BLANKLINE>

    >>> # Streams work too; the sink is never closed
    >>> import sys
    >>> from htmlindent import format_document
    >>> format_document(b"<title>x</title>", sys.stdout, indent="\\t")

    >>> # Or render a tree you built yourself
    >>> from htmlindent import Element, Text, render_to_string
    >>> render_to_string(Element("p", children=(Text("a < b"),)))
    '\\n<p>a &lt; b</p>'

Installation:
    pip install htmlindent
"""

from htmlindent.config import FormatConfig
from htmlindent.elements import INLINE_ELEMENTS, VOID_ELEMENTS, is_inline, is_void
from htmlindent.errors import (
    ConfigError,
    HtmlIndentError,
    InvalidNodeError,
    ParseError,
    RenderError,
    VoidElementError,
)
from htmlindent.nodes import Attribute, Comment, Doctype, Document, Element, ErrorNode, Node, Text
from htmlindent.parser import DEFAULT_CONTAINER, Source, parse_document, parse_fragment
from htmlindent.renderer import (
    Renderer,
    Writer,
    closing_newline,
    render,
    render_document,
    render_fragment,
    render_to_string,
)
from htmlindent.stringbuilder import StringBuilder

__version__ = "0.1.0"


def format_document(
    src: Source,
    output: Writer,
    prefix: str = "",
    indent: str = "",
    *,
    source_name: str | None = None,
) -> None:
    """Reformat a complete HTML document.

    Parses ``src``, renders the tree to ``output`` and ends with a single
    newline.

    Args:
        src: HTML text, raw bytes or a file object
        output: Text sink with a ``write`` method
        prefix: Written at the start of every inserted line
        indent: Written once per nesting level
        source_name: Name of the input for error messages

    Raises:
        ParseError: the input could not be parsed
        RenderError: the tree could not be rendered
    """
    doc = parse_document(src, source_name=source_name)
    render_document(output, doc, prefix, indent)


def format_fragment(
    src: Source,
    output: Writer,
    prefix: str = "",
    indent: str = "",
    *,
    container: str = DEFAULT_CONTAINER,
    source_name: str | None = None,
) -> None:
    """Reformat an HTML fragment.

    ``src`` is parsed as the contents of an implicit ``container`` element.
    Each top-level node is rendered in turn, followed by a single newline.

    Raises:
        ParseError: the input could not be parsed
        RenderError: the tree could not be rendered
    """
    nodes = parse_fragment(src, container, source_name=source_name)
    render_fragment(output, nodes, prefix, indent)


def format_string(
    src: str | bytes,
    *,
    prefix: str = "",
    indent: str = "",
    fragment: bool = False,
    container: str = DEFAULT_CONTAINER,
) -> str:
    """Reformat HTML and return the result as a string.

    Example:
        >>> format_string("<p>Hi <b>there</b></p>", indent="  ", fragment=True)
        '\\n<p>Hi <b>there</b></p>\\n'
    """
    sb = StringBuilder()
    if fragment:
        format_fragment(src, sb, prefix, indent, container=container)
    else:
        format_document(src, sb, prefix, indent)
    return sb.build()


def format_bytes(src: bytes, prefix: str = "", indent: str = "") -> bytes:
    """Reformat a complete HTML document given as bytes.

    The input encoding is sniffed by html5lib; the result is UTF-8.
    Errors propagate to the caller.
    """
    return format_string(src, prefix=prefix, indent=indent).encode("utf-8")


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "format_document",
    "format_fragment",
    "format_string",
    "format_bytes",
    # Parsing
    "DEFAULT_CONTAINER",
    "Source",
    "parse_document",
    "parse_fragment",
    # Rendering
    "Renderer",
    "Writer",
    "closing_newline",
    "render",
    "render_document",
    "render_fragment",
    "render_to_string",
    "StringBuilder",
    # Nodes
    "Attribute",
    "Comment",
    "Doctype",
    "Document",
    "Element",
    "ErrorNode",
    "Node",
    "Text",
    # Element tables
    "INLINE_ELEMENTS",
    "VOID_ELEMENTS",
    "is_inline",
    "is_void",
    # Configuration
    "FormatConfig",
    # Errors
    "HtmlIndentError",
    "ParseError",
    "RenderError",
    "InvalidNodeError",
    "VoidElementError",
    "ConfigError",
]
