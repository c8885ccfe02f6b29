"""Command line overrides applied on top of a loaded configuration."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import structlog
from pydantic import ValidationError

from velacritty.config.constants import COMPONENT_CONFIG
from velacritty.config.merge import TreeValue, merge
from velacritty.config.schemas.ui_config import UiConfig


logger = structlog.get_logger()


@dataclass(frozen=True)
class CliOptions:
    """Configuration related command line options.

    Attributes:
        config_file: Explicit configuration file, skipping discovery.
        option: TOML one-liners such as ``scrolling.history=500``, applied
            in order so later options win.
        working_directory: Initial shell directory.
        title: Window title.
    """

    config_file: Path | None = None
    option: tuple[str, ...] = ()
    working_directory: Path | None = None
    title: str | None = None

    def override_trees(self) -> list[tuple[str, dict[str, TreeValue]]]:
        """Parse every override into a labelled tree.

        Options that are not valid TOML are logged and dropped.
        """
        trees: list[tuple[str, dict[str, TreeValue]]] = []
        for option in self.option:
            try:
                trees.append((option, tomllib.loads(option)))
            except tomllib.TOMLDecodeError as e:
                logger.error(
                    "cli_option_invalid",
                    component=COMPONENT_CONFIG,
                    option=option,
                    error=str(e),
                )
        if self.working_directory is not None:
            trees.append(
                (
                    "--working-directory",
                    {"general": {"working_directory": str(self.working_directory)}},
                )
            )
        if self.title is not None:
            trees.append(("--title", {"window": {"title": self.title}}))
        return trees


def override_config(config: UiConfig, options: CliOptions | None) -> UiConfig:
    """Apply command line overrides to a validated configuration.

    Each override is merged over the current tree and re-validated on its
    own; one that does not validate is logged and skipped.

    Args:
        config: Configuration produced by the loader.
        options: Command line options, if any.

    Returns:
        A new configuration; ``config`` is left untouched.
    """
    if options is None:
        return config

    trees = options.override_trees()
    if not trees:
        return config

    current = config
    for label, tree in trees:
        candidate = merge(current.to_tree(), tree)
        try:
            current = UiConfig.model_validate(candidate)
        except ValidationError as e:
            logger.error(
                "cli_option_rejected",
                component=COMPONENT_CONFIG,
                option=label,
                error_count=e.error_count(),
                errors=[
                    ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
                ],
            )

    return current.model_copy(update={"config_paths": list(config.config_paths)})
