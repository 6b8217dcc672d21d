"""Logging configuration for the mevn CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mevn_cli"


def configure_logging(level: int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Attach a single rich handler to the package logger and set its level.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_mevn_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
        markup=False,
    )
    handler._mevn_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
