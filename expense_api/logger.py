"""
Logging setup shared by the whole application.

setup_logger() configures the root handler once (format, stdout, level)
and hands back a named logger for the calling module.
"""

import logging
import sys
from logging import Logger, StreamHandler
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logger(name: str = __name__, level: str = "INFO") -> Logger:
    """
    Configure logging and return a named logger.

    Parameters
    ----------
    name : str, optional
        Logger name, usually the caller's ``__name__``.
    level : str, optional
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL" (case-insensitive).
        Unknown values fall back to "INFO".

    Returns
    -------
    Logger
        The configured logger.
    """
    logging.basicConfig(
        level=_LEVELS.get(level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
        force=True,
    )
    return logging.getLogger(name)
