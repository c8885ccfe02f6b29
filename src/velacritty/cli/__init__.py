"""Command line interface."""

from velacritty.cli.config import cli


__all__ = ["cli"]
