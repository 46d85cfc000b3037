"""Utility modules for htmlindent.

Provides:
- text: escape_html, is_blank for text processing
- logger: get_logger for logging
"""

from htmlindent.utils.logger import get_logger
from htmlindent.utils.text import escape_html, is_blank

__all__ = [
    "escape_html",
    "get_logger",
    "is_blank",
]
