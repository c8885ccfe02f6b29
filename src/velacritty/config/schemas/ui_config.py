"""Root configuration schema."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from velacritty.config.schemas.base import LogLevel
from velacritty.config.schemas.colors import ColorsConfig
from velacritty.config.schemas.cursor import CursorConfig
from velacritty.config.schemas.font import FontConfig
from velacritty.config.schemas.input import HintsConfig, KeyboardConfig, MouseConfig
from velacritty.config.schemas.scrolling import ScrollingConfig
from velacritty.config.schemas.terminal import (
    BellConfig,
    GeneralConfig,
    SelectionConfig,
    TerminalConfig,
)
from velacritty.config.schemas.window import WindowConfig


class DebugConfig(BaseModel):
    """Debugging options."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    log_level: LogLevel = LogLevel.WARN
    persistent_logging: bool = False
    print_events: bool = False
    render_timer: bool = False


class UiConfig(BaseModel):
    """Fully resolved terminal configuration.

    Every section is optional and filled with defaults, so an empty
    document validates. Unknown keys are ignored.

    Attributes:
        config_paths: Every file visited while loading, root first. Not
            part of the serialized configuration.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    env: dict[str, str] = Field(default_factory=dict)
    scrolling: ScrollingConfig = Field(default_factory=ScrollingConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)
    cursor: CursorConfig = Field(default_factory=CursorConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
    bell: BellConfig = Field(default_factory=BellConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    mouse: MouseConfig = Field(default_factory=MouseConfig)
    hints: HintsConfig = Field(default_factory=HintsConfig)
    keyboard: KeyboardConfig = Field(default_factory=KeyboardConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)
    config_paths: list[Path] = Field(default_factory=list, exclude=True)

    def to_tree(self) -> dict[str, object]:
        """Dump the configuration as a TOML-compatible tree.

        Unset optional values are omitted since TOML has no null.
        """
        return self.model_dump(mode="json", exclude_none=True)

    def to_normalized_json(self) -> str:
        """Serialize to JSON with sorted keys, stable across runs."""
        return json.dumps(self.to_tree(), sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of the normalized configuration.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
