"""Font configuration schema."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_FONT_FAMILY = "monospace"


class FontDescription(BaseModel):
    """A font face to use for one text style.

    Attributes:
        family: Font family name.
        style: Font style; derived from the text style when omitted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    family: Annotated[str, Field(min_length=1)] = DEFAULT_FONT_FAMILY
    style: str | None = None


class Delta(BaseModel):
    """Pixel offset applied to cells or glyphs."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: int = 0
    y: int = 0


class FontConfig(BaseModel):
    """Font settings.

    Attributes:
        size: Point size.
        normal: Regular text face.
        bold: Bold text face.
        italic: Italic text face.
        bold_italic: Bold italic text face.
        offset: Extra space around each cell.
        glyph_offset: Glyph position inside a cell.
        builtin_box_drawing: Draw box and line characters without the font.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    size: Annotated[float, Field(gt=0.0)] = 11.25
    normal: FontDescription = Field(default_factory=FontDescription)
    bold: FontDescription = Field(default_factory=FontDescription)
    italic: FontDescription = Field(default_factory=FontDescription)
    bold_italic: FontDescription = Field(default_factory=FontDescription)
    offset: Delta = Field(default_factory=Delta)
    glyph_offset: Delta = Field(default_factory=Delta)
    builtin_box_drawing: bool = True
