"""Element classification tables for O(1) lookup.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: WHATWG HTML Living Standard, §13.1.2 "Elements"

Usage:
    from htmlindent.elements import VOID_ELEMENTS

    if tag in VOID_ELEMENTS:  # O(1) lookup
        ...
"""

# Void elements can't have any contents and are always self-closed.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Phrasing ("inline") elements never force a line break around themselves.
INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "br",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "i",
        "kbd",
        "mark",
        "nobr",
        "q",
        "rp",
        "rt",
        "rtc",
        "ruby",
        "s",
        "samp",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "time",
        "tt",
        "u",
        "var",
        "wbr",
    }
)

# Text children of these are written unescaped.
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset(
    {"iframe", "noembed", "noframes", "noscript", "plaintext", "script", "style", "xmp"}
)

# The HTML5 parser drops one leading newline inside these on reparse.
LEADING_NEWLINE_ELEMENTS: frozenset[str] = frozenset({"pre", "listing", "textarea"})

# Block elements whose closing tag always stays on the content line.
NO_CLOSING_NEWLINE_ELEMENTS: frozenset[str] = frozenset({"p", "pre"})


def is_void(tag: str) -> bool:
    """Check if ``tag`` is a void element."""
    return tag in VOID_ELEMENTS


def is_inline(tag: str) -> bool:
    """Check if ``tag`` is an inline element."""
    return tag in INLINE_ELEMENTS
