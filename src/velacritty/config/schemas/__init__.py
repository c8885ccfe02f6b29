"""Configuration schema definitions."""

from velacritty.config.schemas.base import (
    BellAnimation,
    CursorBlinking,
    CursorShape,
    Decorations,
    LogLevel,
    Osc52,
    StartupMode,
)
from velacritty.config.schemas.colors import ColorsConfig
from velacritty.config.schemas.cursor import CursorConfig, CursorStyle
from velacritty.config.schemas.font import FontConfig, FontDescription
from velacritty.config.schemas.input import HintsConfig, KeyboardConfig, MouseConfig
from velacritty.config.schemas.scrolling import ScrollingConfig
from velacritty.config.schemas.terminal import (
    BellConfig,
    GeneralConfig,
    Program,
    SelectionConfig,
    TerminalConfig,
)
from velacritty.config.schemas.ui_config import DebugConfig, UiConfig
from velacritty.config.schemas.window import WindowConfig


__all__ = [
    "BellAnimation",
    "BellConfig",
    "ColorsConfig",
    "CursorBlinking",
    "CursorConfig",
    "CursorShape",
    "CursorStyle",
    "DebugConfig",
    "Decorations",
    "FontConfig",
    "FontDescription",
    "GeneralConfig",
    "HintsConfig",
    "KeyboardConfig",
    "LogLevel",
    "MouseConfig",
    "Osc52",
    "Program",
    "ScrollingConfig",
    "SelectionConfig",
    "StartupMode",
    "TerminalConfig",
    "UiConfig",
    "WindowConfig",
]
