"""Logger naming for htmlindent.

Every module logs under the ``htmlindent`` hierarchy, so one
``logging.getLogger("htmlindent")`` call configures the parser, the renderer
and the command-line tool together. Nothing here installs handlers; the CLI
does that with ``logging.basicConfig`` and library users do it themselves.

Example:
    >>> from htmlindent.utils.logger import get_logger
    >>> get_logger(__name__).debug("plaintext element reached")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the htmlindent hierarchy.

    Names already under ``htmlindent`` are used as given; anything else
    gets the ``htmlindent.`` prefix.

        >>> get_logger("htmlindent.parser").name
        'htmlindent.parser'
        >>> get_logger("plugins").name
        'htmlindent.plugins'
    """
    if not (name == "htmlindent" or name.startswith("htmlindent.")):
        name = f"htmlindent.{name}"
    return logging.getLogger(name)
