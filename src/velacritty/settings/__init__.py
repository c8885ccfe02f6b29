"""Process environment settings."""

from .app import EnvironmentSettings, get_settings


__all__ = ["EnvironmentSettings", "get_settings"]
