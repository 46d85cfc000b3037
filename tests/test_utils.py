"""Tests for htmlindent utility modules."""

import logging


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_special_characters(self) -> None:
        from htmlindent.utils.text import escape_html

        assert escape_html("&") == "&amp;"
        assert escape_html("<") == "&lt;"
        assert escape_html(">") == "&gt;"
        assert escape_html('"') == "&quot;"

    def test_single_quote_untouched(self) -> None:
        from htmlindent.utils.text import escape_html

        assert escape_html("it's") == "it's"

    def test_already_escaped_text_is_escaped_again(self) -> None:
        from htmlindent.utils.text import escape_html

        assert escape_html("&amp;") == "&amp;amp;"

    def test_safe_text_unchanged(self) -> None:
        from htmlindent.utils.text import escape_html

        assert escape_html("plain text, nothing else") == "plain text, nothing else"

    def test_empty_string(self) -> None:
        from htmlindent.utils.text import escape_html

        assert escape_html("") == ""


class TestIsBlank:
    """Tests for is_blank."""

    def test_blank(self) -> None:
        from htmlindent.utils.text import is_blank

        assert is_blank("")
        assert is_blank(" \n\t ")

    def test_not_blank(self) -> None:
        from htmlindent.utils.text import is_blank

        assert not is_blank(" x ")


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from htmlindent.utils.logger import get_logger

        assert get_logger("mymodule").name == "htmlindent.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from htmlindent.utils.logger import get_logger

        assert get_logger("htmlindent.renderer").name == "htmlindent.renderer"
        assert get_logger("htmlindent").name == "htmlindent"

    def test_returns_stdlib_logger(self) -> None:
        from htmlindent.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_write_returns_length(self) -> None:
        from htmlindent.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.write("<p>") == 3
        assert sb.write("") == 0
        assert sb.build() == "<p>"

    def test_empty_builds_empty_string(self) -> None:
        from htmlindent.stringbuilder import StringBuilder

        assert StringBuilder().build() == ""
