"""Observability module for logging."""

from velacritty.observability.logging import configure_logging, stringify_paths


__all__ = [
    "configure_logging",
    "stringify_paths",
]
