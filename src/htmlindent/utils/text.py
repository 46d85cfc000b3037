"""Text processing utilities for htmlindent.

Example:
    >>> from htmlindent.utils.text import escape_html
    >>> escape_html('a < b & "c"')
    'a &lt; b &amp; &quot;c&quot;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters in text and attribute values.

    One routine serves both contexts:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;

    Single quotes are left alone; attribute values are always written
    inside double quotes.

    Args:
        text: Text to escape

    Returns:
        Escaped text

    Examples:
        >>> escape_html("<b>")
        '&lt;b&gt;'
        >>> escape_html("it's")
        "it's"
    """
    if not text:
        return ""

    return html_module.escape(text, quote=False).replace('"', "&quot;")


def is_blank(text: str) -> bool:
    """Return True if ``text`` is empty or whitespace only."""
    return not text.strip()
