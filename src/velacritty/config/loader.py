"""Configuration loading entry points.

``load`` is used at startup and never fails: any problem with the config
file falls back to defaults. ``reload`` is used for caller-initiated
reloads and propagates errors so the caller can keep its running config.

Every call builds its own ConfigResolver, so no state is shared between
loads.
"""

import time
from pathlib import Path

import structlog

from velacritty.config.constants import (
    CANONICAL_SUFFIX,
    COMPONENT_CONFIG,
    IMPORT_RECURSION_LIMIT,
    LEGACY_SUFFIX,
)
from velacritty.config.errors import ConfigError, ConfigIoError
from velacritty.config.filesystem import ConfigFileSource, LocalFileSource
from velacritty.config.imports import parse_config
from velacritty.config.overrides import CliOptions, override_config
from velacritty.config.paths import installed_config
from velacritty.config.schemas.ui_config import UiConfig
from velacritty.config.state_machine import ConfigLoadState, ConfigLoadStateMachine
from velacritty.config.template import generate_default_config
from velacritty.config.validation import deserialize
from velacritty.settings import EnvironmentSettings


logger = structlog.get_logger()


class ConfigResolver:
    """Resolves one root configuration file into a UiConfig.

    Implements a state machine for the load:
    PENDING -> PARSING -> VALIDATING -> READY, or FAILED.

    A resolver is single use; create a new one for every load.
    """

    def __init__(
        self,
        source: ConfigFileSource | None = None,
        recursion_limit: int = IMPORT_RECURSION_LIMIT,
        home: Path | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            source: File access collaborator (defaults to the local disk).
            recursion_limit: Maximum depth of nested imports.
            home: Home directory for ``~/`` imports; from the environment
                if omitted.
        """
        self._source = source or LocalFileSource()
        self._recursion_limit = recursion_limit
        self._home = home
        self._state_machine = ConfigLoadStateMachine()
        self._config_paths: list[Path] = []
        self._duration_ms: float = 0

    @property
    def state(self) -> ConfigLoadState:
        """Get the current load state."""
        return self._state_machine.state

    @property
    def config_paths(self) -> list[Path]:
        """Get every file visited so far, root first."""
        return self._config_paths.copy()

    @property
    def duration_ms(self) -> float:
        """Get the load duration in milliseconds."""
        return self._duration_ms

    def resolve(self, path: Path) -> UiConfig:
        """Parse, expand imports, merge and validate ``path``.

        Args:
            path: Root configuration file.

        Returns:
            The typed configuration with ``config_paths`` filled in.

        Raises:
            ConfigError: If the root file cannot be read, parsed or validated.
            ConfigLoadStateError: If the resolver was already used.
        """
        start_time = time.perf_counter()
        log = logger.bind(component=COMPONENT_CONFIG, path=str(path))

        self._state_machine.transition(ConfigLoadState.PARSING)
        try:
            tree = parse_config(
                path,
                self._config_paths,
                self._recursion_limit,
                source=self._source,
                warn_pruned=True,
                home=self._home,
            )

            self._state_machine.transition(ConfigLoadState.VALIDATING)
            config = deserialize(tree, file_path=str(path))
        except ConfigError:
            self._state_machine.transition(ConfigLoadState.FAILED)
            raise

        self._state_machine.transition(ConfigLoadState.READY)
        self._duration_ms = (time.perf_counter() - start_time) * 1000
        log.debug(
            "config_loaded",
            file_count=len(self._config_paths),
            config_load_duration_ms=self._duration_ms,
        )

        return config.model_copy(update={"config_paths": self.config_paths})


def load_from(path: Path, *, source: ConfigFileSource | None = None) -> UiConfig:
    """Load a configuration file and log errors.

    Raises:
        ConfigError: Any failure, after logging it.
    """
    log = logger.bind(component=COMPONENT_CONFIG, path=str(path))
    try:
        return ConfigResolver(source).resolve(path)
    except ConfigIoError as e:
        if e.not_found:
            log.error("config_file_not_found")
        else:
            log.error("config_load_failed", error=str(e))
        raise
    except ConfigError as e:
        log.error("config_load_failed", error=str(e))
        raise


def load(
    options: CliOptions | None = None,
    *,
    source: ConfigFileSource | None = None,
    environment: EnvironmentSettings | None = None,
    platform: str | None = None,
) -> UiConfig:
    """Load the configuration used at startup.

    Falls back in order to: the given or discovered config file, then
    defaults. When no file is found at all, a commented default file is
    generated for the user. Command line overrides apply in every case.

    Args:
        options: Command line options.
        source: File access collaborator (defaults to the local disk).
        environment: Environment for discovery; read from the process if
            omitted.
        platform: Override for ``sys.platform``.

    Returns:
        The typed configuration. This function does not raise for
        configuration problems.
    """
    files = source or LocalFileSource()
    config_path = (
        (options.config_file if options is not None else None)
        or installed_config(
            CANONICAL_SUFFIX, environment=environment, source=files, platform=platform
        )
        or installed_config(
            LEGACY_SUFFIX, environment=environment, source=files, platform=platform
        )
    )

    if config_path is not None:
        try:
            config = load_from(config_path, source=files)
        except ConfigError:
            config = UiConfig(config_paths=[config_path])
    else:
        logger.info("config_file_missing_using_defaults", component=COMPONENT_CONFIG)
        generated = generate_default_config(
            source=files, environment=environment, platform=platform
        )
        config = UiConfig(config_paths=[generated] if generated is not None else [])

    return override_config(config, options)


def reload(
    config_path: Path,
    options: CliOptions | None = None,
    *,
    source: ConfigFileSource | None = None,
) -> UiConfig:
    """Reload the configuration from an explicit file.

    Args:
        config_path: File to load.
        options: Command line options to re-apply.
        source: File access collaborator (defaults to the local disk).

    Returns:
        The typed configuration.

    Raises:
        ConfigError: If the file cannot be loaded; no defaults are used.
    """
    logger.debug("config_reloading", component=COMPONENT_CONFIG, path=str(config_path))

    config = load_from(config_path, source=source)
    return override_config(config, options)
