"""Base schema types for configuration."""

from enum import Enum
from typing import Annotated

from pydantic import Field


HEX_COLOR_PATTERN = r"^(#|0x)[0-9a-fA-F]{6}$"
CELL_COLOR_PATTERN = r"^((#|0x)[0-9a-fA-F]{6}|CellForeground|CellBackground)$"

# RGB color such as "#1e1e2e" or "0x1e1e2e"
Color = Annotated[str, Field(pattern=HEX_COLOR_PATTERN)]

# RGB color, or the color of the cell underneath
CellColor = Annotated[str, Field(pattern=CELL_COLOR_PATTERN)]


class Decorations(str, Enum):
    """Window decorations."""

    FULL = "Full"
    NONE = "None"
    TRANSPARENT = "Transparent"
    BUTTONLESS = "Buttonless"


class StartupMode(str, Enum):
    """Initial window state."""

    WINDOWED = "Windowed"
    MAXIMIZED = "Maximized"
    FULLSCREEN = "Fullscreen"
    SIMPLE_FULLSCREEN = "SimpleFullscreen"


class CursorShape(str, Enum):
    """Cursor shape."""

    BLOCK = "Block"
    UNDERLINE = "Underline"
    BEAM = "Beam"


class CursorBlinking(str, Enum):
    """Cursor blinking state.

    Never and Always ignore escape sequences requesting a change;
    Off and On are only the initial state.
    """

    NEVER = "Never"
    OFF = "Off"
    ON = "On"
    ALWAYS = "Always"


class BellAnimation(str, Enum):
    """Visual bell easing function."""

    EASE = "Ease"
    EASE_OUT = "EaseOut"
    EASE_OUT_SINE = "EaseOutSine"
    EASE_OUT_QUAD = "EaseOutQuad"
    EASE_OUT_CUBIC = "EaseOutCubic"
    EASE_OUT_QUART = "EaseOutQuart"
    EASE_OUT_QUINT = "EaseOutQuint"
    EASE_OUT_EXPO = "EaseOutExpo"
    EASE_OUT_CIRC = "EaseOutCirc"
    LINEAR = "Linear"


class Osc52(str, Enum):
    """Clipboard access granted to OSC 52 escape sequences."""

    DISABLED = "Disabled"
    ONLY_COPY = "OnlyCopy"
    ONLY_PASTE = "OnlyPaste"
    COPY_PASTE = "CopyPaste"


class LogLevel(str, Enum):
    """Log verbosity of the terminal."""

    OFF = "Off"
    ERROR = "Error"
    WARN = "Warn"
    INFO = "Info"
    DEBUG = "Debug"
    TRACE = "Trace"
