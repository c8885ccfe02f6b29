"""Constants for the configuration module."""

from typing import Final


APP_NAME: Final = "velacritty"

# Canonical and legacy configuration file suffixes, in discovery order
CANONICAL_SUFFIX: Final = "toml"
LEGACY_SUFFIX: Final = "yml"
LEGACY_EXTENSIONS: Final = frozenset({".yaml", ".yml"})

# Maximum depth of nested configuration imports
IMPORT_RECURSION_LIMIT: Final = 5

# Maximum scrollback amount configurable
MAX_SCROLLBACK_LINES: Final = 100_000
DEFAULT_SCROLLBACK_LINES: Final = 10_000
DEFAULT_SCROLL_MULTIPLIER: Final = 3

# Key holding the import directive, at the root or under GENERAL_SECTION
IMPORT_KEY: Final = "import"
GENERAL_SECTION: Final = "general"

# UTF-8 byte order mark as decoded text
BYTE_ORDER_MARK: Final = "\ufeff"

# System-wide configuration directory on unix
SYSTEM_CONFIG_DIR: Final = "/etc"

# Log component names
COMPONENT_CONFIG: Final = "config"
COMPONENT_CLI: Final = "cli"


def config_file_name(suffix: str) -> str:
    """Return the configuration file name for a suffix (e.g. 'velacritty.toml')."""
    return f"{APP_NAME}.{suffix}"
