"""Default configuration file generated on first run."""

from pathlib import Path

import structlog

from velacritty.config.constants import (
    CANONICAL_SUFFIX,
    COMPONENT_CONFIG,
    config_file_name,
)
from velacritty.config.filesystem import ConfigFileSource, LocalFileSource
from velacritty.config.paths import default_config_dir
from velacritty.settings import EnvironmentSettings


logger = structlog.get_logger()


DEFAULT_CONFIG_TEMPLATE = r'''# Velacritty Configuration
# This file was auto-generated on first run.

# ┌──────────────────────────────────────────────────────────────┐
# │ FONT CONFIGURATION                                           │
# └──────────────────────────────────────────────────────────────┘
# Font family and size impact readability and performance.
# Recommendation: Use a Nerd Font for icon/glyph support.
# Popular choices: MesloLGM Nerd Font, FiraCode Nerd Font, JetBrainsMono Nerd Font

[font]
size = 18.0

[font.normal]
family = "MesloLGM Nerd Font"
style = "Regular"

[font.bold]
family = "MesloLGM Nerd Font"
style = "Bold"

[font.italic]
family = "MesloLGM Nerd Font"
style = "Italic"

[font.bold_italic]
family = "MesloLGM Nerd Font"
style = "Bold Italic"

# ┌──────────────────────────────────────────────────────────────┐
# │ WINDOW CONFIGURATION                                         │
# └──────────────────────────────────────────────────────────────┘

[window]
# Window opacity (0.0 = fully transparent, 1.0 = opaque)
opacity = 0.95

# Window decorations
# - Full: Borders and title bar
# - None: No borders or title bar
# - Transparent: Title bar, transparent background
# - Buttonless: Title bar, no minimize/close buttons
decorations = "Full"

# Startup mode
# - Windowed
# - Maximized
# - Fullscreen
# - SimpleFullscreen (macOS only)
startup_mode = "Windowed"

# Padding around terminal content (in pixels)
[window.padding]
x = 10
y = 10

# ┌──────────────────────────────────────────────────────────────┐
# │ SCROLLING CONFIGURATION                                      │
# └──────────────────────────────────────────────────────────────┘

[scrolling]
# Maximum scrollback buffer lines (0 disables scrollback, at most 100000)
history = 5000

# Lines per scroll event (mouse wheel/touchpad)
multiplier = 3

# Auto-scroll to bottom on new output
# Set to false to freeze viewport (useful for TUI apps like htop)
# Toggle at runtime: Shift+Ctrl+A
auto_scroll = true

# ┌──────────────────────────────────────────────────────────────┐
# │ CURSOR CONFIGURATION                                         │
# └──────────────────────────────────────────────────────────────┘

[cursor]
# Blink interval (milliseconds)
blink_interval = 750

# Cursor will stop blinking after being idle for this duration (seconds)
# Set to 0 to never stop blinking
blink_timeout = 0

# Cursor style options:
# - Block, Underline, Beam
[cursor.style]
shape = "Block"
blinking = "On"

# ┌──────────────────────────────────────────────────────────────┐
# │ COLOR SCHEME (Catppuccin-inspired Dark Theme)                │
# └──────────────────────────────────────────────────────────────┘

[colors.primary]
background = "#1e1e2e"  # Base
foreground = "#cdd6f4"  # Text

[colors.cursor]
text = "#1e1e2e"        # Base
cursor = "#f5e0dc"      # Rosewater

[colors.vi_mode_cursor]
text = "#1e1e2e"        # Base
cursor = "#b4befe"      # Lavender

[colors.search.matches]
foreground = "#1e1e2e"  # Base
background = "#a6adc8"  # Subtext0

[colors.search.focused_match]
foreground = "#1e1e2e"  # Base
background = "#a6e3a1"  # Green

[colors.hints.start]
foreground = "#1e1e2e"  # Base
background = "#f9e2af"  # Yellow

[colors.hints.end]
foreground = "#1e1e2e"  # Base
background = "#a6adc8"  # Subtext0

[colors.selection]
text = "CellForeground"
background = "#45475a"  # Surface1

# Normal colors
[colors.normal]
black = "#45475a"       # Surface1
red = "#f38ba8"         # Red
green = "#a6e3a1"       # Green
yellow = "#f9e2af"      # Yellow
blue = "#89b4fa"        # Blue
magenta = "#f5c2e7"     # Pink
cyan = "#94e2d5"        # Teal
white = "#bac2de"       # Subtext1

# Bright colors
[colors.bright]
black = "#585b70"       # Surface2
red = "#f38ba8"         # Red
green = "#a6e3a1"       # Green
yellow = "#f9e2af"      # Yellow
blue = "#89b4fa"        # Blue
magenta = "#f5c2e7"     # Pink
cyan = "#94e2d5"        # Teal
white = "#a6adc8"       # Subtext0

# ┌──────────────────────────────────────────────────────────────┐
# │ BELL CONFIGURATION                                           │
# └──────────────────────────────────────────────────────────────┘

[bell]
# Visual bell animation
# - Ease | EaseOut | EaseOutSine | EaseOutQuad | EaseOutCubic | EaseOutQuart | EaseOutQuint | EaseOutExpo | EaseOutCirc | Linear
animation = "EaseOutExpo"

# Duration of visual bell (milliseconds)
duration = 0

# Visual bell color
color = "#f5e0dc"  # Rosewater

# ┌──────────────────────────────────────────────────────────────┐
# │ SELECTION CONFIGURATION                                      │
# └──────────────────────────────────────────────────────────────┘

[selection]
# Characters considered part of a word for double-click selection
semantic_escape_chars = ",│`|:\"' ()[]{}<>\t"

# When enabled, selected text is automatically copied to clipboard
save_to_clipboard = false

# ┌──────────────────────────────────────────────────────────────┐
# │ TERMINAL CONFIGURATION                                       │
# └──────────────────────────────────────────────────────────────┘

[terminal]
# OSC 52 clipboard interaction (copy/paste via escape sequences)
# - Disabled: Ignore OSC 52
# - OnlyCopy: Allow copying only
# - OnlyPaste: Allow pasting only
# - CopyPaste: Allow both
osc52 = "CopyPaste"

# ┌──────────────────────────────────────────────────────────────┐
# │ MOUSE CONFIGURATION                                          │
# └──────────────────────────────────────────────────────────────┘

[mouse]
# Hide mouse cursor when typing
hide_when_typing = true

# ┌──────────────────────────────────────────────────────────────┐
# │ KEYBOARD HINTS (URL/PATH DETECTION)                          │
# └──────────────────────────────────────────────────────────────┘

[[hints.enabled]]
# Regex for URLs
regex = "(ipfs:|ipns:|magnet:|mailto:|gemini://|gopher://|https://|http://|news:|file:|git://|ssh:|ftp://)[^\u0000-\u001F\u007F-\u009F<>\"\\s{-}\\^⟨⟩`]+"

# Open with default handler (xdg-open, open, start)
[[hints.enabled.binding]]
key = "U"
mods = "Control|Shift"

[hints.enabled.mouse]
enabled = true

# ┌──────────────────────────────────────────────────────────────┐
# │ KEY BINDINGS (CUSTOM)                                        │
# └──────────────────────────────────────────────────────────────┘
# Uncomment and modify as needed. See documentation for available actions.

# [[keyboard.bindings]]
# key = "N"
# mods = "Control|Shift"
# action = "CreateNewWindow"

# [[keyboard.bindings]]
# key = "Plus"
# mods = "Control"
# action = "IncreaseFontSize"

# [[keyboard.bindings]]
# key = "Minus"
# mods = "Control"
# action = "DecreaseFontSize"
'''


def generate_default_config(
    *,
    source: ConfigFileSource | None = None,
    environment: EnvironmentSettings | None = None,
    platform: str | None = None,
) -> Path | None:
    """Write the default template to the user configuration directory.

    This is a best-effort fallback for when no configuration file exists.
    Failures are logged, never raised.

    Returns:
        Path of the generated file, or None if it could not be written.
    """
    files = source or LocalFileSource()
    log = logger.bind(component=COMPONENT_CONFIG)

    config_dir = default_config_dir(environment=environment, platform=platform)
    if config_dir is None:
        log.error("default_config_dir_unknown")
        return None

    config_path = config_dir / config_file_name(CANONICAL_SUFFIX)
    try:
        files.write_text(config_path, DEFAULT_CONFIG_TEMPLATE)
    except OSError as e:
        log.error("default_config_write_failed", path=str(config_path), error=str(e))
        return None

    log.info("default_config_generated", path=str(config_path))
    return config_path
