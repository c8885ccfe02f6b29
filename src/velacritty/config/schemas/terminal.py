"""Terminal behavior configuration schemas."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from velacritty.config.schemas.base import BellAnimation, Color, Osc52


DEFAULT_SEMANTIC_ESCAPE_CHARS = ",│`|:\"' ()[]{}<>\t"


class Program(BaseModel):
    """A program with arguments, such as the shell."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    program: Annotated[str, Field(min_length=1)]
    args: list[str] = Field(default_factory=list)


class TerminalConfig(BaseModel):
    """Settings for the terminal process and escape sequence handling.

    Attributes:
        shell: Shell to spawn; a bare string is the program without arguments.
        osc52: Clipboard access allowed to OSC 52 sequences.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    shell: Program | str | None = None
    osc52: Osc52 = Osc52.ONLY_COPY


class BellConfig(BaseModel):
    """Visual bell settings.

    Attributes:
        animation: Easing of the flash.
        duration: Flash duration in milliseconds (0 disables the visual bell).
        color: Flash color.
        command: Program to run when the bell rings.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    animation: BellAnimation = BellAnimation.EASE_OUT_EXPO
    duration: Annotated[int, Field(ge=0)] = 0
    color: Color = "#ffffff"
    command: Program | None = None


class SelectionConfig(BaseModel):
    """Text selection settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    semantic_escape_chars: str = DEFAULT_SEMANTIC_ESCAPE_CHARS
    save_to_clipboard: bool = False


class GeneralConfig(BaseModel):
    """Miscellaneous settings.

    ``general.import`` is consumed during import expansion and is not part
    of this schema.

    Attributes:
        live_config_reload: Reload the configuration when a file changes.
        working_directory: Initial directory of the shell.
        ipc_socket: Offer the IPC socket for ``velacritty msg``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    live_config_reload: bool = True
    working_directory: Path | None = None
    ipc_socket: bool = True
