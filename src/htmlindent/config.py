"""Formatting configuration for htmlindent.

The formatter recognizes exactly four settings: whether the input is a
fragment, the fragment's context element, the per-line prefix and the
per-level indent unit.

Usage:
    >>> config = FormatConfig(indent="  ")
    >>> config.renderer().indent
    '  '

    >>> # From external sources (YAML, JSON, argparse namespaces)
    >>> FormatConfig.from_dict({"indent": "\\t", "unknown_key": "ignored"})
    FormatConfig(prefix='', indent='\\t', fragment=False, container='div')

"""

from __future__ import annotations

from dataclasses import dataclass, fields

from htmlindent.errors import ConfigError
from htmlindent.parser import DEFAULT_CONTAINER
from htmlindent.renderer import Renderer


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatting configuration.

    Attributes:
        prefix: Written at the start of every inserted line
        indent: Written once per nesting level after the prefix
        fragment: Parse input as a fragment instead of a full document
        container: Context element for fragment parsing

    """

    prefix: str = ""
    indent: str = ""
    fragment: bool = False
    container: str = DEFAULT_CONTAINER

    @classmethod
    def from_dict(cls, config_dict: dict) -> FormatConfig:
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored. ``None`` values fall back to the defaults.

        Raises:
            ConfigError: a known key has a value of the wrong type
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {
            k: v for k, v in config_dict.items() if k in valid_fields and v is not None
        }
        config = cls(**filtered)
        config.validate()
        return config

    def validate(self) -> None:
        """Check option types and values.

        Raises:
            ConfigError: on the first invalid option
        """
        if not isinstance(self.prefix, str):
            raise ConfigError("prefix", f"expected a string, got {type(self.prefix).__name__}")
        if not isinstance(self.indent, str):
            raise ConfigError("indent", f"expected a string, got {type(self.indent).__name__}")
        if not isinstance(self.container, str) or not self.container:
            raise ConfigError("container", "expected a non-empty tag name")

    def renderer(self) -> Renderer:
        """Build a Renderer using this configuration's prefix and indent."""
        return Renderer(self.prefix, self.indent)
