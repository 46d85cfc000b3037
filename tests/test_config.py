"""Tests for FormatConfig."""

import pytest

from htmlindent import ConfigError, FormatConfig, Renderer


class TestFormatConfig:
    """FormatConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = FormatConfig()
        assert config.prefix == ""
        assert config.indent == ""
        assert config.fragment is False
        assert config.container == "div"

    def test_immutability(self) -> None:
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.indent = "  "  # type: ignore[misc]

    def test_renderer(self) -> None:
        renderer = FormatConfig(prefix="> ", indent="\t").renderer()
        assert isinstance(renderer, Renderer)
        assert renderer.prefix == "> "
        assert renderer.indent == "\t"


class TestFromDict:
    """FormatConfig.from_dict filtering and validation."""

    def test_known_keys(self) -> None:
        config = FormatConfig.from_dict({"indent": "  ", "fragment": True})
        assert config == FormatConfig(indent="  ", fragment=True)

    def test_unknown_keys_ignored(self) -> None:
        config = FormatConfig.from_dict({"indent": "  ", "verbose": True, "color": "red"})
        assert config == FormatConfig(indent="  ")

    def test_none_uses_default(self) -> None:
        config = FormatConfig.from_dict({"prefix": None, "container": None})
        assert config == FormatConfig()

    def test_empty_dict(self) -> None:
        assert FormatConfig.from_dict({}) == FormatConfig()

    def test_non_string_indent_rejected(self) -> None:
        with pytest.raises(ConfigError, match="indent"):
            FormatConfig.from_dict({"indent": 2})

    def test_non_string_prefix_rejected(self) -> None:
        with pytest.raises(ConfigError, match="prefix"):
            FormatConfig.from_dict({"prefix": b"> "})

    def test_empty_container_rejected(self) -> None:
        with pytest.raises(ConfigError, match="container"):
            FormatConfig(container="").validate()
