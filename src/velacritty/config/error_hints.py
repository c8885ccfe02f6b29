"""Hints shown next to configuration errors.

Validation errors are matched by dotted location first, then by the last
path segment, then by pydantic error type. Load failures that never reach
validation are matched by exception class.
"""

from typing import Final

from velacritty.config.constants import MAX_SCROLLBACK_LINES
from velacritty.config.errors import (
    ConfigError,
    ConfigIoError,
    ConfigParseError,
    LegacyParseError,
    LegacySerializeError,
)


DEFAULT_HINT: Final = "See the commented default velacritty.toml for valid values."

# Pydantic error type -> hint
ERROR_HINTS: Final[dict[str, str]] = {
    "enum": "Use one of the listed values; names are case sensitive.",
    "int_type": "Use a whole number without quotes.",
    "int_parsing": "Use a whole number without quotes.",
    "int_from_float": "Use a whole number; fractions are not allowed here.",
    "float_type": "Use a number without quotes.",
    "float_parsing": "Use a number without quotes.",
    "string_type": "Wrap the value in double quotes.",
    "bool_type": "Use true or false without quotes.",
    "bool_parsing": "Use true or false without quotes.",
    "list_type": "Use a TOML array such as [\"a\", \"b\"].",
    "dict_type": "Use a TOML table ([section] or { key = value }).",
    "model_type": "Use a TOML table ([section] or { key = value }).",
    "missing": "Add this key; it has no default.",
    "greater_than": "The value is below the allowed minimum.",
    "greater_than_equal": "The value is below the allowed minimum.",
    "less_than_equal": "The value is above the allowed maximum.",
    "string_too_short": "The value must not be empty.",
    "string_pattern_mismatch": "Write colors as \"#rrggbb\" or \"0xrrggbb\".",
    "value_error": "The value is outside the supported range.",
}

# Dotted location or bare key -> hint
FIELD_HINTS: Final[dict[str, str]] = {
    "scrolling.history": f"Scrollback is limited to 0..{MAX_SCROLLBACK_LINES} lines.",
    "scrolling.multiplier": "Lines per wheel step, from 0 to 255.",
    "scrolling.auto_scroll": "Set to true or false.",
    "window.opacity": "From 0.0 (transparent) to 1.0 (opaque).",
    "window.decorations": "One of Full, None, Transparent or Buttonless.",
    "window.startup_mode": "One of Windowed, Maximized, Fullscreen or SimpleFullscreen.",
    "shape": "One of Block, Underline or Beam.",
    "blinking": "One of Never, Off, On or Always.",
    "terminal.osc52": "One of Disabled, OnlyCopy, OnlyPaste or CopyPaste.",
    "bell.animation": "An easing name such as EaseOutExpo or Linear.",
    "debug.log_level": "One of Off, Error, Warn, Info, Debug or Trace.",
    "font.size": "A font size in points greater than 0.",
    "cursor.thickness": "A fraction of the cell between 0.0 and 1.0.",
}

# Load failure -> hint, checked in order
LOAD_ERROR_HINTS: Final[tuple[tuple[type[ConfigError], str], ...]] = (
    (ConfigParseError, "Fix the TOML syntax near the reported line."),
    (LegacyParseError, "Fix the YAML indentation, or migrate the file to TOML."),
    (
        LegacySerializeError,
        "The YAML document must be a mapping; migrate the file to TOML.",
    ),
)


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a hint for a validation error.

    Args:
        error_type: The pydantic error type (e.g. 'enum', 'value_error').
        field_name: Dotted location such as 'cursor.style.shape'.

    Returns:
        The most specific hint available.
    """
    if field_name:
        if field_name in FIELD_HINTS:
            return FIELD_HINTS[field_name]
        # 'cursor.vi_mode_style.shape' -> 'shape'
        key = field_name.rsplit(".", 1)[-1]
        if key in FIELD_HINTS:
            return FIELD_HINTS[key]

    return ERROR_HINTS.get(error_type, DEFAULT_HINT)


def get_load_error_hint(error: ConfigError) -> str | None:
    """Get a hint for a failure that happened before validation.

    Returns:
        A hint, or None when there is nothing useful to add.
    """
    if isinstance(error, ConfigIoError):
        if error.not_found:
            return "Check the path, or run without it to use the discovered file."
        return "Check that the file is readable and UTF-8 encoded."
    for error_class, hint in LOAD_ERROR_HINTS:
        if isinstance(error, error_class):
            return hint
    return None


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Render one validation error as '<location>: <message>' plus a hint line."""
    line = f"{location}: {message}"
    if not include_hint:
        return line
    return f"{line}\n    Hint: {get_error_hint(error_type, location)}"
