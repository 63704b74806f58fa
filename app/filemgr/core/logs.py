"""Logging setup for the filemgr CLI.

Library modules only create module-level loggers; the CLI attaches a
single Rich handler to the package logger at startup.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "filemgr"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the package logger to write through Rich on stderr.

    Calling this again replaces the previous handler instead of stacking
    a second one.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
