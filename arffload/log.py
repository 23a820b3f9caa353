# Authors: Raghav R V <rvraghav93@gmail.com>
#
# Licence: BSD 3 clause

"""Logging helpers.

Library modules only obtain loggers through ``get_logger`` and never touch
handlers. Applications that want the reader's messages on stdout call
``setup_logging`` once; output lines read ``LABEL message``.
"""

from __future__ import annotations

import logging
import sys

__all__ = [
    "LOGGER_NAME",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "reset_logging",
]

LOGGER_NAME = "arffload"

_configured: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Prefix each message with a short level label (WARNING -> WARN)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a labeled stdout handler to the package logger.

    Calling it again only updates the level; no second handler is added.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    if _configured is None:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(LabeledFormatter())
        logger.addHandler(handler)
        # keep records away from the root logger to avoid duplicate lines
        logger.propagate = False
        _configured = logger

    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Undo ``setup_logging``. Mainly for tests."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _configured = None
