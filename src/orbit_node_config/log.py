"""Logging setup for orbit-node-config library."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .constants import LOGGER_NAME

# One shared console
_console = Console()


def get_console() -> Console:
    return _console


def setup_logger(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_path=False,
        show_time=False,
        console=_console,
    )
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(handler)

    return logger
