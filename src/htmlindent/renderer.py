"""Indenting HTML renderer.

Walks a node tree depth-first and writes formatted markup to an output sink.
Every block element starts on a fresh line indented by its depth; inline
elements flow with the surrounding text. The output reparses to a tree
equivalent to the input, give or take whitespace-only text.

Formatting:
A newline is ``"\\n" + prefix + indent * depth``. ``prefix`` is written once
per line, ``indent`` once per nesting level. Children of the starting node
are at depth 1; children of a Document are at the Document's own depth.

Closing tags:
A block element's closing tag goes on its own line only when its content is
made of block children (see ``closing_newline``). Any inline child keeps
the whole element on one line segment, even when block children are mixed
in.

plaintext:
Nothing after a ``<plaintext>`` element can be represented in HTML, not
even closing tags of its ancestors. Reaching one makes every recursive call
return ``Flow.STOP``; ``Renderer.render`` turns that into a normal return.

Thread Safety:
Renderer holds only immutable configuration. Multiple threads can share
one instance as long as each uses its own output sink.

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import Protocol

from htmlindent.elements import (
    INLINE_ELEMENTS,
    LEADING_NEWLINE_ELEMENTS,
    NO_CLOSING_NEWLINE_ELEMENTS,
    RAW_TEXT_ELEMENTS,
    VOID_ELEMENTS,
)
from htmlindent.errors import InvalidNodeError, VoidElementError
from htmlindent.nodes import Comment, Doctype, Document, Element, ErrorNode, Node, Text
from htmlindent.stringbuilder import StringBuilder
from htmlindent.utils.logger import get_logger
from htmlindent.utils.text import escape_html, is_blank

logger = get_logger(__name__)


class Writer(Protocol):
    """Anything with a text ``write`` method: files, StringIO, StringBuilder."""

    def write(self, s: str, /) -> object: ...


class Flow(Enum):
    """Result of rendering one node."""

    CONTINUE = auto()
    # A <plaintext> element was rendered; write nothing more.
    STOP = auto()


def closing_newline(element: Element) -> bool:
    """Decide whether ``element``'s closing tag goes on its own line.

    False for inline elements, for ``p`` and ``pre``, for elements with any
    inline child and for empty elements. When the first child is text, true
    only if that text is whitespace.
    """
    if element.tag in INLINE_ELEMENTS:
        return False
    if element.tag in NO_CLOSING_NEWLINE_ELEMENTS:
        return False

    for child in element.children:
        if isinstance(child, Element) and child.tag in INLINE_ELEMENTS:
            return False

    first = element.first_child
    if first is None:
        # render as <foo></foo>
        return False
    if isinstance(first, Text):
        return is_blank(first.data)

    return True


def _quoted(value: str) -> str:
    """Quote a doctype identifier, using single quotes if it contains ``"``."""
    quote = "'" if '"' in value else '"'
    return f"{quote}{value}{quote}"


def _doctype(node: Doctype) -> str:
    parts = ["<!DOCTYPE ", node.name]
    if node.public_id:
        parts.append(" PUBLIC ")
        parts.append(_quoted(node.public_id))
        if node.system_id:
            parts.append(" ")
            parts.append(_quoted(node.system_id))
    elif node.system_id:
        parts.append(" SYSTEM ")
        parts.append(_quoted(node.system_id))
    parts.append(">")
    return "".join(parts)


def _start_tag(element: Element) -> str:
    parts = ["<", element.tag]
    for attr in element.attrs:
        parts.append(" ")
        if attr.namespace:
            parts.append(attr.namespace)
            parts.append(":")
        parts.append(attr.key)
        parts.append('="')
        parts.append(escape_html(attr.value))
        parts.append('"')
    return "".join(parts)


class Renderer:
    """Render node trees as indented HTML.

    Usage:
        >>> from htmlindent.nodes import Element, Text
        >>> renderer = Renderer(indent="  ")
        >>> sb = StringBuilder()
        >>> renderer.render(sb, Element("div", children=(Element("p", children=(Text("Hi"),)),)))
        >>> sb.build()
        '\\n<div>\\n  <p>Hi</p>\\n</div>'

    """

    __slots__ = ("_prefix", "_indent")

    def __init__(self, prefix: str = "", indent: str = "") -> None:
        """Initialize renderer.

        Args:
            prefix: Written once at the start of every inserted line
            indent: Written once per nesting level after the prefix
        """
        self._prefix = prefix
        self._indent = indent

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def indent(self) -> str:
        return self._indent

    def render(self, output: Writer, node: Node) -> None:
        """Render ``node`` and its descendants to ``output``.

        Does not flush or close ``output``.

        Raises:
            InvalidNodeError: an ErrorNode or unknown object in the tree
            VoidElementError: a void element with children
        """
        if self._render(output, node, 0) is Flow.STOP:
            logger.debug("plaintext element reached, rendering stopped")

    def render_document(self, output: Writer, root: Node) -> None:
        """Render a parsed document followed by a single trailing newline."""
        self.render(output, root)
        output.write("\n")

    def render_fragment(self, output: Writer, nodes: Iterable[Node]) -> None:
        """Render top-level fragment nodes in order, then a trailing newline.

        Each node is rendered on its own, so a ``<plaintext>`` in one of them
        does not stop its later siblings.
        """
        for node in nodes:
            self.render(output, node)
        output.write("\n")

    # =========================================================================
    # Tree walk
    # =========================================================================

    def _newline(self, output: Writer, depth: int) -> None:
        output.write("\n" + self._prefix + self._indent * depth)

    def _render(self, output: Writer, node: Node, depth: int) -> Flow:
        match node:
            case ErrorNode():
                raise InvalidNodeError("cannot render an ErrorNode node", node)
            case Text():
                output.write(escape_html(node.data))
            case Document():
                for child in node.children:
                    if self._render(output, child, depth) is Flow.STOP:
                        return Flow.STOP
            case Element():
                return self._render_element(output, node, depth)
            case Comment():
                output.write(f"<!--{node.data}-->")
            case Doctype():
                output.write(_doctype(node))
            case _:
                raise InvalidNodeError("unknown node type", node)
        return Flow.CONTINUE

    def _render_element(self, output: Writer, element: Element, depth: int) -> Flow:
        tag = element.tag
        first = element.first_child

        if tag in VOID_ELEMENTS and first is not None:
            raise VoidElementError(tag)

        if tag not in INLINE_ELEMENTS:
            self._newline(output, depth)
        output.write(_start_tag(element))

        if tag in VOID_ELEMENTS:
            output.write("/>")
            return Flow.CONTINUE
        output.write(">")

        # The parser drops a newline that directly follows these start tags.
        if (
            tag in LEADING_NEWLINE_ELEMENTS
            and isinstance(first, Text)
            and first.data.startswith("\n")
        ):
            output.write("\n")

        if tag in RAW_TEXT_ELEMENTS:
            for child in element.children:
                if isinstance(child, Text):
                    output.write(child.data)
                elif self._render(output, child, depth + 1) is Flow.STOP:
                    return Flow.STOP
            if tag == "plaintext":
                # Must be the last thing in the output, with no closing tag.
                return Flow.STOP
        else:
            for child in element.children:
                if self._render(output, child, depth + 1) is Flow.STOP:
                    return Flow.STOP

        if closing_newline(element):
            self._newline(output, depth)
        output.write(f"</{tag}>")
        return Flow.CONTINUE


def render(output: Writer, node: Node, prefix: str = "", indent: str = "") -> None:
    """Render ``node`` to ``output`` with the given prefix and indent."""
    Renderer(prefix, indent).render(output, node)


def render_to_string(node: Node, prefix: str = "", indent: str = "") -> str:
    """Render ``node`` and return the markup as a string.

    Example:
        >>> from htmlindent.nodes import Element
        >>> render_to_string(Element("hr"))
        '\\n<hr/>'
    """
    sb = StringBuilder()
    Renderer(prefix, indent).render(sb, node)
    return sb.build()


def render_document(output: Writer, root: Node, prefix: str = "", indent: str = "") -> None:
    """Render a full document tree and append one trailing newline."""
    Renderer(prefix, indent).render_document(output, root)


def render_fragment(
    output: Writer, nodes: Iterable[Node], prefix: str = "", indent: str = ""
) -> None:
    """Render the top-level nodes of a fragment and append one trailing newline."""
    Renderer(prefix, indent).render_fragment(output, nodes)
