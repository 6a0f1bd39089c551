"""Logging configuration for tiletracer."""

import logging
from typing import Optional

from tiletracer.config import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: Optional[str] = None, name: str = "tiletracer") -> logging.Logger:
    """
    Set up console logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid stacking handlers when called more than once
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
