"""Logging configuration for command-line entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["setup_logging"]


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route ``unosim`` log records through a Rich handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        console: Console to write to; defaults to stderr.
    """

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
