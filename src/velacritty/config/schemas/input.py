"""Mouse, keyboard and hint configuration schemas.

Bindings and hint definitions are kept as opaque tables; interpreting
them is up to the input subsystem.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_HINTS_ALPHABET = "jfkdls;ahgurieowpq"

Binding = dict[str, object]


class MouseConfig(BaseModel):
    """Mouse settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hide_when_typing: bool = False
    bindings: list[Binding] = Field(default_factory=list)


class KeyboardConfig(BaseModel):
    """Keyboard settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    bindings: list[Binding] = Field(default_factory=list)


class HintsConfig(BaseModel):
    """Regex hints for clickable text such as URLs."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    alphabet: Annotated[str, Field(min_length=2)] = DEFAULT_HINTS_ALPHABET
    enabled: list[dict[str, object]] = Field(default_factory=list)
