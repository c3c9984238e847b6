"""Logging helpers.

The library only emits records; the calling application decides levels and
where they go. Security:
    - We never log raw input text or reference numbers, only counts.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a library logger that stays silent unless the app configures logging.

    The level is left unset so records follow the application's configuration.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def enable_console_logging(name: str = "ocrref", level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger, once, for scripts without logging setup."""
    logger = logging.getLogger(name)
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
