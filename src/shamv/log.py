"""Logging setup for the shamv CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler

_HANDLER_NAME = "shamv-rich"


def configure_logging(level: str = "WARNING") -> None:
    """Route ``shamv`` loggers to stderr through a Rich handler.

    Calling this again only adjusts the level.
    """

    logger = logging.getLogger("shamv")
    logger.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        highlighter=NullHighlighter(),
    )
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.propagate = False
