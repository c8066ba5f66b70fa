"""
Logging setup for pylot-content.

Everything logs through the standard logging module with module-level
loggers. configure_logging() attaches a single Rich handler bound to stderr:
stdout carries the MCP stream and must never see a log line.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pylot_content"

stderr_console = Console(stderr=True)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Install the stderr handler on the package logger.

    Safe to call more than once; the handler is only attached the first time
    and later calls just adjust the level.

    Args:
        level: Level name or number

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=stderr_console,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
