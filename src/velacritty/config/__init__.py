"""Configuration loading, import expansion, merging and validation."""

from velacritty.config.errors import (
    ConfigError,
    ConfigIoError,
    ConfigParseError,
    ConfigValidationError,
    ImportDirectiveError,
    LegacyParseError,
    LegacySerializeError,
    RecursionLimitError,
)
from velacritty.config.loader import ConfigResolver, load, load_from, reload
from velacritty.config.merge import TreeValue, merge
from velacritty.config.overrides import CliOptions, override_config
from velacritty.config.schemas import ScrollingConfig, UiConfig


__all__ = [
    "CliOptions",
    "ConfigError",
    "ConfigIoError",
    "ConfigParseError",
    "ConfigResolver",
    "ConfigValidationError",
    "ImportDirectiveError",
    "LegacyParseError",
    "LegacySerializeError",
    "RecursionLimitError",
    "ScrollingConfig",
    "TreeValue",
    "UiConfig",
    "load",
    "load_from",
    "merge",
    "override_config",
    "reload",
]
