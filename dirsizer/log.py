"""Logging setup for the command-line and server entrypoints."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "dirsizer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ColorFormatter(logging.Formatter):
    """Wrap each record in an ANSI color picked by level."""

    COLORS = {
        logging.DEBUG: "\033[2m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno, "")
        return f"{color}{message}{self.RESET}" if color else message


def configure_logging(verbose: bool = False, no_color: bool = False) -> logging.Logger:
    """Attach one stderr handler to the package logger.

    Repeated calls replace the handler instead of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    use_color = not no_color and sys.stderr.isatty()
    handler.setFormatter(ColorFormatter(LOG_FORMAT) if use_color else logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger


__all__ = [
    "LOGGER_NAME",
    "ColorFormatter",
    "configure_logging",
]
