"""CLI commands for inspecting the resolved terminal configuration."""

import json
import logging
import sys
from pathlib import Path

import click
import structlog

from velacritty import __version__
from velacritty.config.constants import COMPONENT_CLI
from velacritty.config.error_hints import format_validation_error, get_load_error_hint
from velacritty.config.errors import ConfigError, ConfigValidationError
from velacritty.config.loader import load, reload
from velacritty.config.overrides import CliOptions
from velacritty.observability.logging import configure_logging
from velacritty.settings import get_settings


logger = structlog.get_logger()


def _report_failure(error: ConfigError) -> None:
    """Print a failed load to stderr with hints."""
    click.echo("Configuration check failed:", err=True)
    if isinstance(error, ConfigValidationError):
        for err in error.errors:
            formatted = format_validation_error(
                location=err["loc"],
                message=err["msg"],
                error_type=err.get("type", "unknown"),
                include_hint=True,
            )
            click.echo(f"  - {formatted}", err=True)
    else:
        click.echo(f"  - {error}", err=True)
        hint = get_load_error_hint(error)
        if hint is not None:
            click.echo(f"    Hint: {hint}", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Use JSON format for logs (default: false).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
def cli(json_logs: bool, verbose: bool) -> None:
    """Velacritty configuration tools."""
    level = logging.DEBUG if verbose else get_settings().logging_level()
    configure_logging(level=level, output=sys.stderr, json_format=json_logs)


@cli.command()
@click.option(
    "--config-file",
    "config_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Configuration file to use instead of the discovered one.",
)
@click.option(
    "--option",
    "-o",
    "option",
    multiple=True,
    help="TOML override such as 'scrolling.history=500' (repeatable).",
)
def show(config_file: Path | None, option: tuple[str, ...]) -> None:
    """Print the resolved configuration as JSON.

    Uses the startup semantics: problems fall back to defaults.
    """
    config = load(CliOptions(config_file=config_file, option=option))

    logger.info(
        "config_shown",
        component=COMPONENT_CLI,
        config_paths=[str(path) for path in config.config_paths],
    )

    click.echo(json.dumps(config.to_tree(), sort_keys=True, indent=2))


@cli.command()
@click.argument("config_path", type=click.Path(path_type=Path))
@click.option(
    "--option",
    "-o",
    "option",
    multiple=True,
    help="TOML override such as 'scrolling.history=500' (repeatable).",
)
def check(config_path: Path, option: tuple[str, ...]) -> None:
    """Validate a configuration file and everything it imports."""
    try:
        config = reload(config_path, CliOptions(option=option))
    except ConfigError as e:
        _report_failure(e)
        sys.exit(1)

    click.echo("Configuration OK")
    click.echo(f"  Files: {len(config.config_paths)}")
    for path in config.config_paths:
        click.echo(f"    {path}")
    click.echo(f"  Scrollback history: {config.scrolling.history}")
    click.echo(f"  Checksum: {config.compute_checksum()}")


if __name__ == "__main__":
    cli()
