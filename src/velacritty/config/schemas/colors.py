"""Color scheme configuration schema."""

from pydantic import BaseModel, ConfigDict, Field

from velacritty.config.schemas.base import CellColor, Color


class PrimaryColors(BaseModel):
    """Default foreground and background colors."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    foreground: Color = "#d8d8d8"
    background: Color = "#181818"
    dim_foreground: Color | None = None
    bright_foreground: Color | None = None


class CellColors(BaseModel):
    """Text and background colors of a highlighted cell."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: CellColor = "CellBackground"
    cursor: CellColor = "CellForeground"


class SelectionColors(BaseModel):
    """Colors of selected text."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: CellColor = "CellBackground"
    background: CellColor = "CellForeground"


class NormalColors(BaseModel):
    """The eight normal ANSI colors."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    black: Color = "#181818"
    red: Color = "#ac4242"
    green: Color = "#90a959"
    yellow: Color = "#f4bf75"
    blue: Color = "#6a9fb5"
    magenta: Color = "#aa759f"
    cyan: Color = "#75b5aa"
    white: Color = "#d8d8d8"


class BrightColors(BaseModel):
    """The eight bright ANSI colors."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    black: Color = "#6b6b6b"
    red: Color = "#c55555"
    green: Color = "#aac474"
    yellow: Color = "#feca88"
    blue: Color = "#82b8c8"
    magenta: Color = "#c28cb8"
    cyan: Color = "#93d3c3"
    white: Color = "#f8f8f8"


class ColorsConfig(BaseModel):
    """Color scheme.

    ``search``, ``hints``, ``footer_bar``, ``line_indicator`` and
    ``indexed_colors`` are passed through to the renderer untouched.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    primary: PrimaryColors = Field(default_factory=PrimaryColors)
    cursor: CellColors = Field(default_factory=CellColors)
    vi_mode_cursor: CellColors = Field(default_factory=CellColors)
    selection: SelectionColors = Field(default_factory=SelectionColors)
    normal: NormalColors = Field(default_factory=NormalColors)
    bright: BrightColors = Field(default_factory=BrightColors)
    dim: NormalColors | None = None
    search: dict[str, object] = Field(default_factory=dict)
    hints: dict[str, object] = Field(default_factory=dict)
    footer_bar: dict[str, object] = Field(default_factory=dict)
    line_indicator: dict[str, object] = Field(default_factory=dict)
    indexed_colors: list[dict[str, object]] = Field(default_factory=list)
    transparent_background_colors: bool = False
    draw_bold_text_with_bright_colors: bool = False
