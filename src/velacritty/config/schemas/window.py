"""Window configuration schema."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from velacritty.config.schemas.base import Decorations, StartupMode


DEFAULT_WINDOW_TITLE = "Velacritty"


class Padding(BaseModel):
    """Blank space around the terminal grid, in pixels."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: Annotated[int, Field(ge=0)] = 0
    y: Annotated[int, Field(ge=0)] = 0


class Dimensions(BaseModel):
    """Initial grid size; zero uses the window manager's size."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    columns: Annotated[int, Field(ge=0)] = 0
    lines: Annotated[int, Field(ge=0)] = 0


class WindowConfig(BaseModel):
    """Window settings.

    Attributes:
        opacity: Background opacity from 0.0 (transparent) to 1.0.
        padding: Space around the grid.
        dynamic_padding: Spread leftover space evenly around the grid.
        dimensions: Initial grid size.
        decorations: Window border and title bar style.
        startup_mode: Initial window state.
        title: Window title.
        dynamic_title: Allow applications to change the title.
        blur: Blur content behind a transparent window.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    opacity: Annotated[float, Field(ge=0.0, le=1.0)] = 1.0
    padding: Padding = Field(default_factory=Padding)
    dynamic_padding: bool = False
    dimensions: Dimensions = Field(default_factory=Dimensions)
    decorations: Decorations = Decorations.FULL
    startup_mode: StartupMode = StartupMode.WINDOWED
    title: str = DEFAULT_WINDOW_TITLE
    dynamic_title: bool = True
    blur: bool = False
