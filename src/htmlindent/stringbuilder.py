"""StringBuilder: an in-memory output sink for the renderer.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

The renderer only needs ``write(str)`` from its output, so a StringBuilder
can stand in for any text stream:

    >>> from htmlindent.renderer import render
    >>> sb = StringBuilder()
    >>> render(sb, node)
    >>> sb.build()

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with a file-like ``write``.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("<p>")
            3
            >>> sb.write("Hello</p>")
            9
            >>> sb.build()
            '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Append ``s`` and return the number of characters written.

        Matches ``io.TextIOBase.write`` so the builder can be passed
        anywhere a text stream is expected.
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
