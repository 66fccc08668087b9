"""Logging configuration for shcomplete.

Everything logs below the ``shcomplete`` logger, which writes to stderr or a
file and never to stdout: stdout carries the LSP stdio transport.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER_NAME = "shcomplete"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _make_handler(log_file: Path | None) -> logging.Handler:
    if log_file is None:
        return logging.StreamHandler(sys.stderr)
    return logging.FileHandler(log_file, encoding="utf-8")


def configure_logging(*, level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Configure the shcomplete logger.

    Calling it again replaces the previous handler.

    Args:
        level: Log level name, case insensitive. Unknown names fall back to INFO.
        log_file: Optional path to log file. If None, logs to stderr.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = _make_handler(log_file)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(log_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the ``shcomplete.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
