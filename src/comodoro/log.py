"""
Logging setup for comodoro.

Modules log through logging.getLogger(__name__); the CLI attaches a
Rich handler on stderr so stdout stays free for command output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "comodoro"
CONSOLE_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the comodoro logger.

    Args:
        verbose: Enable debug output (hook commands, resolved events)

    Returns:
        Configured logger
    """
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(handler)

    return logger
