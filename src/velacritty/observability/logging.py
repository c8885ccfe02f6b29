"""Structured logging for configuration diagnostics."""

import logging
import sys
from pathlib import PurePath
from typing import TextIO

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger


def stringify_paths(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Render path values, including lists of paths, as plain strings."""
    for key, value in event_dict.items():
        if isinstance(value, PurePath):
            event_dict[key] = str(value)
        elif isinstance(value, list | tuple) and any(
            isinstance(item, PurePath) for item in value
        ):
            event_dict[key] = [
                str(item) if isinstance(item, PurePath) else item for item in value
            ]
    return event_dict


def _renderer(json_format: bool, output: TextIO) -> Processor:
    if json_format:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=output.isatty())


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Route every configuration event to ``output``.

    Unreadable imports, pruned YAML keys, unused keys and rejected
    overrides are all logged through module level structlog loggers;
    this sets the level they are filtered at and how they are rendered.

    Args:
        level: Minimum stdlib level to emit.
        output: Stream receiving one line per event.
        json_format: Render JSON lines instead of console output.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            stringify_paths,
            structlog.processors.format_exc_info,
            _renderer(json_format, output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )
