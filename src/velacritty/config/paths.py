"""Configuration file discovery and import path normalization."""

import sys
from pathlib import Path

from velacritty.config.constants import (
    APP_NAME,
    SYSTEM_CONFIG_DIR,
    config_file_name,
)
from velacritty.config.filesystem import ConfigFileSource, LocalFileSource
from velacritty.settings import EnvironmentSettings, get_settings


HOME_PREFIX = "~/"


def _is_windows(platform: str | None) -> bool:
    return (platform or sys.platform) == "win32"


def candidate_paths(
    suffix: str,
    *,
    environment: EnvironmentSettings | None = None,
    platform: str | None = None,
) -> list[Path]:
    """List every location probed for an installed config, in order.

    On unix the order is:

    1. ``$XDG_CONFIG_HOME/velacritty/velacritty.<suffix>``, then the same
       under each ``$XDG_CONFIG_DIRS`` entry
    2. ``$XDG_CONFIG_HOME/velacritty.<suffix>``, then each
       ``$XDG_CONFIG_DIRS`` entry
    3. ``$HOME/.config/velacritty/velacritty.<suffix>``
    4. ``$HOME/.velacritty.<suffix>``
    5. ``/etc/velacritty/velacritty.<suffix>``

    On Windows only ``%APPDATA%/velacritty/velacritty.<suffix>`` is used.

    Args:
        suffix: File extension without the dot (e.g. 'toml').
        environment: Environment to consult; read from the process if omitted.
        platform: Override for ``sys.platform``.

    Returns:
        Candidate paths, most preferred first. Duplicates are kept.
    """
    env = environment or get_settings()
    file_name = config_file_name(suffix)

    if _is_windows(platform):
        return [Path(env.appdata) / APP_NAME / file_name] if env.appdata else []

    search_dirs = [env.config_home(), *env.config_dirs()]
    candidates = [d / APP_NAME / file_name for d in search_dirs if d is not None]
    candidates.extend(d / file_name for d in search_dirs if d is not None)

    if env.home:
        home = Path(env.home)
        candidates.append(home / ".config" / APP_NAME / file_name)
        candidates.append(home / f".{file_name}")

    candidates.append(Path(SYSTEM_CONFIG_DIR) / APP_NAME / file_name)
    return candidates


def installed_config(
    suffix: str,
    *,
    environment: EnvironmentSettings | None = None,
    source: ConfigFileSource | None = None,
    platform: str | None = None,
) -> Path | None:
    """Get the location of the first installed config file for ``suffix``.

    Returns:
        The first existing candidate path, or None.
    """
    files = source or LocalFileSource()
    for candidate in candidate_paths(
        suffix, environment=environment, platform=platform
    ):
        if files.exists(candidate):
            return candidate
    return None


def default_config_dir(
    *,
    environment: EnvironmentSettings | None = None,
    platform: str | None = None,
) -> Path | None:
    """Directory where a default configuration file is generated.

    Returns:
        ``$XDG_CONFIG_HOME/velacritty`` (falling back to
        ``$HOME/.config/velacritty``), ``%APPDATA%/velacritty`` on Windows,
        or None when neither can be determined.
    """
    env = environment or get_settings()

    if _is_windows(platform):
        return Path(env.appdata) / APP_NAME if env.appdata else None

    config_home = env.config_home()
    return config_home / APP_NAME if config_home is not None else None


def normalize_import(
    base_config_path: Path,
    import_path: str | Path,
    *,
    home: Path | None = None,
) -> Path:
    """Resolve an import path against the importing file.

    A leading ``~/`` is replaced with the home directory. A path that is
    still relative afterwards is joined to the directory containing
    ``base_config_path``. The filesystem is never consulted.

    Args:
        base_config_path: Path of the file declaring the import.
        import_path: Path string from the ``import`` directive.
        home: Home directory; taken from the environment if omitted.

    Returns:
        Normalized import path.
    """
    raw = str(import_path)
    path = Path(raw)

    if raw.startswith(HOME_PREFIX):
        home_dir = home if home is not None else get_settings().home_dir()
        if home_dir is not None:
            path = home_dir / raw[len(HOME_PREFIX) :]

    if not path.is_absolute():
        path = base_config_path.parent / path

    return path
