"""HTML5 parsing front end.

The tree construction itself is delegated to html5lib, which implements the
WHATWG parsing algorithm (implied ``<html>``/``<head>``/``<body>``, adoption
agency, foster parenting, foreign content). html5lib builds a
``xml.dom.minidom`` tree; this module converts it into the immutable
htmlindent.nodes tree the renderer walks.

Usage:
    >>> from htmlindent.parser import parse_document, parse_fragment
    >>> doc = parse_document("<p>Hello")
    >>> [child.tag for child in doc.children[0].children]
    ['head', 'body']
    >>> parse_fragment("<b>x</b>y")
    (Element(tag='b', attrs=(), children=(Text(data='x'),)), Text(data='y'))

Thread Safety:
Each call builds its own html5lib parser. Safe to call from any thread.

"""

from __future__ import annotations

from typing import IO
from xml.dom import Node as DomNode

import html5lib

from htmlindent.errors import ParseError
from htmlindent.nodes import Attribute, Comment, Doctype, Document, Element, Node, Text
from htmlindent.utils.logger import get_logger

logger = get_logger(__name__)

Source = str | bytes | IO[str] | IO[bytes]

# Conventional context element for fragment parsing.
DEFAULT_CONTAINER = "div"

# Undeclared byte input is read as UTF-8 rather than windows-1252.
LIKELY_ENCODING = "utf-8"


def _parser_options(src: Source) -> dict:
    # Scripting is on, as in browsers: <noscript> content is raw text.
    options: dict = {"treebuilder": "dom", "scripting": True}
    # html5lib rejects encoding hints for text input.
    if hasattr(src, "read"):
        binary = not isinstance(src.read(0), str)
    else:
        binary = not isinstance(src, str)
    if binary:
        options["likely_encoding"] = LIKELY_ENCODING
    return options


def parse_document(src: Source, *, source_name: str | None = None) -> Document:
    """Parse a complete HTML document.

    Args:
        src: HTML text, raw bytes (encoding is sniffed) or a file object
        source_name: Name of the input for error messages

    Returns:
        Document root node

    Raises:
        ParseError: html5lib could not read the input
    """
    try:
        dom = html5lib.parse(src, **_parser_options(src))
    except (ValueError, LookupError) as e:
        raise ParseError(f"cannot parse document: {e}", source_name) from e

    # The dom builder appends a text node per character token; merge them.
    dom.normalize()
    doc = Document(children=_convert_children(dom, source_name))
    logger.debug("parsed document: %d top-level nodes", len(doc.children))
    return doc


def parse_fragment(
    src: Source,
    container: str = DEFAULT_CONTAINER,
    *,
    source_name: str | None = None,
) -> tuple[Node, ...]:
    """Parse an HTML fragment as if it were the contents of ``container``.

    Args:
        src: HTML text, raw bytes (encoding is sniffed) or a file object
        container: Tag name of the implicit context element
        source_name: Name of the input for error messages

    Returns:
        Top-level nodes of the fragment, in document order

    Raises:
        ParseError: html5lib could not read the input
    """
    try:
        fragment = html5lib.parseFragment(src, container=container, **_parser_options(src))
    except (ValueError, LookupError) as e:
        raise ParseError(f"cannot parse fragment: {e}", source_name) from e

    fragment.normalize()
    nodes = _convert_children(fragment, source_name)
    logger.debug("parsed fragment in <%s>: %d top-level nodes", container, len(nodes))
    return nodes


# =============================================================================
# DOM conversion
# =============================================================================


def _convert_children(parent, source_name: str | None) -> tuple[Node, ...]:
    # Walks with an explicit stack: document depth is bounded only by memory.
    # Nodes are immutable, so an element is built once all its children are.
    stack = [(parent, iter(parent.childNodes))]
    converted: list[list[Node]] = [[]]
    while True:
        dom_node, pending = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            children = tuple(converted.pop())
            if not stack:
                return children
            converted[-1].append(
                Element(
                    tag=dom_node.tagName,
                    attrs=_convert_attributes(dom_node),
                    children=children,
                )
            )
        elif child.nodeType == DomNode.ELEMENT_NODE:
            stack.append((child, iter(child.childNodes)))
            converted.append([])
        else:
            converted[-1].append(_convert_leaf(child, source_name))


def _convert_attributes(element) -> tuple[Attribute, ...]:
    attrs = []
    for attr in element.attributes.values():
        # Only adjusted foreign attributes (xlink:href, xml:lang) carry a prefix;
        # a literal "foo:bar" in HTML stays a plain name.
        if attr.prefix:
            attrs.append(Attribute(attr.localName, attr.value, attr.prefix))
        else:
            attrs.append(Attribute(attr.name, attr.value))
    return tuple(attrs)


def _convert_leaf(dom_node, source_name: str | None) -> Node:
    node_type = dom_node.nodeType
    if node_type in (DomNode.TEXT_NODE, DomNode.CDATA_SECTION_NODE):
        return Text(dom_node.data)
    if node_type == DomNode.COMMENT_NODE:
        return Comment(dom_node.data)
    if node_type == DomNode.DOCUMENT_TYPE_NODE:
        return Doctype(
            name=dom_node.name or "",
            public_id=dom_node.publicId or None,
            system_id=dom_node.systemId or None,
        )
    raise ParseError(f"unsupported DOM node type {node_type}", source_name)
