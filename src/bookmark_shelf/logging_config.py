"""Logging configuration for bookmark-shelf."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Route loguru output to a single stream.

    Store operations log at DEBUG, so they only show up with ``verbose``.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr if sink is None else sink, level=level, format="{level.icon} {message}")
