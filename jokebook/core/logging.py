"""
Standard logging setup.

Usage:
    from jokebook.core.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

from .config import get_settings


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Get a named logger with console output.

    Avoids duplicate handlers if called multiple times with the same name.
    The level defaults to LOG_LEVEL from settings.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else get_settings().log_level)
    return logger
