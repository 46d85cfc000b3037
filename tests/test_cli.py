"""Tests for the htmlindent command-line interface."""

import io
import logging
import sys

import pytest

from htmlindent.cli import build_parser, main


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch):
    """Replace stdin with a byte stream; returns a setter."""

    def set_input(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return set_input


class TestArguments:
    """Argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.fragment is False
        assert args.prefix == ""
        assert args.indent == ""
        assert args.verbose is False

    def test_short_flags(self) -> None:
        args = build_parser().parse_args(["-f", "-p", "> ", "-i", "\t"])
        assert args.fragment is True
        assert args.prefix == "> "
        assert args.indent == "\t"


class TestMain:
    """Running the command end to end."""

    def test_document(self, stdin, capsys: pytest.CaptureFixture[str]) -> None:
        stdin(b"<title>T</title>")
        assert main(["--indent", "  "]) == 0
        assert capsys.readouterr().out == (
            "\n<html>\n  <head>\n    <title>T</title>\n  </head>\n  <body></body>\n</html>\n"
        )

    def test_fragment(self, stdin, capsys: pytest.CaptureFixture[str]) -> None:
        stdin(b"<ul><li>a</ul>")
        assert main(["--fragment", "--prefix", "# ", "--indent", "  "]) == 0
        assert capsys.readouterr().out == "\n# <ul>\n#   <li>a</li>\n# </ul>\n"

    def test_fragment_logs_at_info(
        self, stdin, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        stdin(b"x")
        with caplog.at_level(logging.INFO, logger="htmlindent"):
            assert main(["-f"]) == 0
        assert "parsing fragment" in caplog.text
        assert capsys.readouterr().out == "x\n"

    def test_parse_failure_exits_nonzero(
        self,
        stdin,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        import html5lib

        def boom(*args, **kwargs):
            raise ValueError("cannot decode")

        monkeypatch.setattr(html5lib, "parse", boom)
        stdin(b"<p>x")
        assert main([]) == 1
        assert "cannot decode" in caplog.text

    def test_write_failure_exits_nonzero(self, stdin, monkeypatch: pytest.MonkeyPatch) -> None:
        class BrokenStdout:
            def write(self, s: str) -> int:
                raise BrokenPipeError("pipe closed")

            def flush(self) -> None:
                pass

        monkeypatch.setattr(sys, "stdout", BrokenStdout())
        stdin(b"<p>x")
        assert main([]) == 1

    def test_output_is_utf8_regardless_of_locale(
        self, stdin, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        raw = io.BytesIO()
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw, encoding="ascii"))
        stdin("<p>café ☃</p>".encode())
        assert main(["-f"]) == 0
        assert raw.getvalue() == "\n<p>café ☃</p>\n".encode()

    def test_deep_nesting_is_logged(
        self,
        stdin,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        depth = 600
        stdin(("<div>" * depth + "x" + "</div>" * depth).encode())
        assert main(["-f"]) == 1
        assert "nested too deeply" in caplog.text
