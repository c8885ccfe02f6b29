"""Process environment settings powered by Pydantic BaseSettings."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Default XDG configuration search directories
DEFAULT_XDG_CONFIG_DIRS = ("/etc/xdg",)


class EnvironmentSettings(BaseSettings):
    """Environment variables consulted while locating configuration files."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    home: str | None = Field(default=None, validation_alias="HOME")
    xdg_config_home: str | None = Field(
        default=None, validation_alias="XDG_CONFIG_HOME"
    )
    xdg_config_dirs: str | None = Field(
        default=None, validation_alias="XDG_CONFIG_DIRS"
    )
    appdata: str | None = Field(default=None, validation_alias="APPDATA")
    log_level: str = Field(default="INFO", validation_alias="VELACRITTY_LOG_LEVEL")

    def home_dir(self) -> Path | None:
        """Return the user's home directory, if one can be determined."""
        if self.home:
            return Path(self.home)
        try:
            return Path.home()
        except RuntimeError:
            return None

    def config_home(self) -> Path | None:
        """Return the XDG user configuration directory.

        Relative ``XDG_CONFIG_HOME`` values are ignored as required by the
        XDG base directory specification.
        """
        if self.xdg_config_home and Path(self.xdg_config_home).is_absolute():
            return Path(self.xdg_config_home)
        home = self.home_dir()
        return home / ".config" if home is not None else None

    def config_dirs(self) -> list[Path]:
        """Return the XDG system configuration search directories."""
        if self.xdg_config_dirs:
            dirs = [
                Path(entry)
                for entry in self.xdg_config_dirs.split(":")
                if entry and Path(entry).is_absolute()
            ]
            if dirs:
                return dirs
        return [Path(entry) for entry in DEFAULT_XDG_CONFIG_DIRS]

    def logging_level(self) -> int:
        """Map ``VELACRITTY_LOG_LEVEL`` to a stdlib logging level."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> EnvironmentSettings:
    """Get a settings instance reflecting the current environment."""
    return EnvironmentSettings()
