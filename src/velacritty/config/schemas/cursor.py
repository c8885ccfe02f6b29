"""Cursor configuration schema."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from velacritty.config.schemas.base import CursorBlinking, CursorShape


class CursorStyle(BaseModel):
    """Cursor shape and blinking behavior."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    shape: CursorShape = CursorShape.BLOCK
    blinking: CursorBlinking = CursorBlinking.OFF


class CursorConfig(BaseModel):
    """Cursor settings.

    Attributes:
        style: Cursor style in normal mode.
        vi_mode_style: Cursor style in vi mode; falls back to ``style``.
        blink_interval: Blink period in milliseconds.
        blink_timeout: Seconds of inactivity before blinking stops (0 = never).
        unfocused_hollow: Draw a hollow block when the window is unfocused.
        thickness: Beam and underline thickness as a fraction of the cell.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    style: CursorStyle = Field(default_factory=CursorStyle)
    vi_mode_style: CursorStyle | None = None
    blink_interval: Annotated[int, Field(ge=10)] = 750
    blink_timeout: Annotated[int, Field(ge=0)] = 5
    unfocused_hollow: bool = True
    thickness: Annotated[float, Field(ge=0.0, le=1.0)] = 0.15
