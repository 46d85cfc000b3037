"""Typed HTML node tree for htmlindent.

All nodes are frozen dataclasses with slots for:
- Immutability: the renderer only reads the tree, never rewrites it
- Type safety: IDE autocomplete, catch errors at dev time
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Document   (root wrapper, no markup of its own)
├── Element    (tag, ordered attributes, children)
├── Text       (escaped on output)
├── Comment    (written verbatim)
├── Doctype    (name, optional public/system identifiers)
└── ErrorNode  (a malformed tree; rendering it fails)

Trees are normally produced by htmlindent.parser from html5lib output, but
they can also be built by hand:

    >>> from htmlindent.nodes import Element, Text
    >>> Element("p", children=(Text("Hello"),))
    Element(tag='p', attrs=(), children=(Text(data='Hello'),))

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single element attribute.

    ``namespace`` is empty for ordinary HTML attributes. Foreign attributes
    adjusted by the HTML5 tree builder (``xlink:href``, ``xml:lang``) carry
    their prefix here and the local name in ``key``.

    """

    key: str
    value: str
    namespace: str = ""


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a fully parsed document.

    Transparent for indentation: its children render at the depth the
    document itself was given.

    """

    children: tuple[Node, ...] = ()

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element.

    Void elements (``br``, ``img``, ...) are allowed to carry children here;
    that is a validity error reported when the tree is rendered.

    """

    tag: str
    attrs: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Character data. Escaped on output except inside raw-text elements."""

    data: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment. The payload is written verbatim between ``<!--`` and ``-->``."""

    data: str


@dataclass(frozen=True, slots=True)
class Doctype(Node):
    """Document type declaration.

    Empty identifiers are treated the same as missing ones.

    """

    name: str
    public_id: str | None = None
    system_id: str | None = None


@dataclass(frozen=True, slots=True)
class ErrorNode(Node):
    """Placeholder for a malformed tree. Cannot be rendered."""

    message: str = ""
