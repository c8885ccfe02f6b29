"""Shared fixtures for configuration tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from velacritty.settings import EnvironmentSettings


ENV_VARS = ("HOME", "XDG_CONFIG_HOME", "XDG_CONFIG_DIRS", "APPDATA", "VELACRITTY_LOG_LEVEL")


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every environment variable used for config discovery."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def home_env(clean_env: pytest.MonkeyPatch) -> EnvironmentSettings:
    """Environment with HOME=/home/u and no XDG overrides."""
    clean_env.setenv("HOME", "/home/u")
    return EnvironmentSettings()


@pytest.fixture
def home_dir() -> Path:
    return Path("/home/u")
