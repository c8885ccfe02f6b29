"""Scrolling configuration schema."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from velacritty.config.constants import (
    DEFAULT_SCROLL_MULTIPLIER,
    DEFAULT_SCROLLBACK_LINES,
    MAX_SCROLLBACK_LINES,
)


class ScrollingConfig(BaseModel):
    """Scrolling related settings.

    Attributes:
        multiplier: Lines scrolled per mouse wheel tick.
        auto_scroll: Jump to the bottom when new output arrives.
        history: Scrollback buffer size in lines (0 disables scrollback).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    multiplier: Annotated[int, Field(strict=True, ge=0, le=255)] = (
        DEFAULT_SCROLL_MULTIPLIER
    )
    auto_scroll: Annotated[bool, Field(strict=True)] = True
    history: Annotated[int, Field(strict=True, ge=0)] = DEFAULT_SCROLLBACK_LINES

    @field_validator("history")
    @classmethod
    def validate_history_limit(cls, lines: int) -> int:
        """Reject scrollback sizes above the supported maximum."""
        if lines > MAX_SCROLLBACK_LINES:
            msg = (
                "exceeded maximum scrolling history "
                f"({lines}/{MAX_SCROLLBACK_LINES})"
            )
            raise ValueError(msg)
        return lines
