"""Command-line interface for htmlindent.

Reads HTML from standard input and writes the reformatted markup to
standard output:

    htmlindent --indent '  ' < page.html
    htmlindent --fragment --prefix '> ' < snippet.html

Exits with status 1 and logs the error on any parse, render or I/O failure.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from typing import IO

from htmlindent.config import FormatConfig
from htmlindent.errors import HtmlIndentError
from htmlindent.parser import parse_document, parse_fragment
from htmlindent.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlindent",
        description="Reformat HTML from stdin with consistent indentation.",
    )
    parser.add_argument(
        "-f", "--fragment", action="store_true", help="parse input as a fragment"
    )
    parser.add_argument("-p", "--prefix", default="", help="prefix for each line")
    parser.add_argument("-i", "--indent", default="", help="indent marker")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(config: FormatConfig, stdin: IO[bytes], stdout: IO[str]) -> None:
    """Parse everything from ``stdin`` and write the formatted result."""
    src = stdin.read()
    renderer = config.renderer()
    if config.fragment:
        logger.info("parsing fragment")
        nodes = parse_fragment(src, config.container, source_name="<stdin>")
        renderer.render_fragment(stdout, nodes)
    else:
        doc = parse_document(src, source_name="<stdin>")
        renderer.render_document(stdout, doc)
    stdout.flush()


def _utf8_stdout() -> None:
    # Output is UTF-8 whatever the locale, as stdin is read. Newlines pass
    # through untranslated.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", newline="")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = FormatConfig.from_dict(vars(args))
        _utf8_stdout()
        run(config, sys.stdin.buffer, sys.stdout)
    except (HtmlIndentError, OSError) as e:
        logger.error("%s", e)
        return 1
    except RecursionError:
        logger.error("input is nested too deeply to render")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
