"""
Module: logger_file_helper.py

Author: Michael Economou
Date: 2026-10-19

logger_file_helper.py
Provides utility functions to attach file handlers to a logger,
with optional filtering by logger name.
Functions:
add_file_handler: Attaches a rotating file handler with custom level and optional filter.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class NameFilter(logging.Filter):
    """Passes only records emitted by the logger with the given name."""

    def __init__(self, logger_name: str) -> None:
        super().__init__()
        self.logger_name = logger_name

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == self.logger_name


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    filter_by_name: str | None = None,
) -> RotatingFileHandler:
    """
    Attaches a rotating file handler to a logger.

    Args:
        logger (logging.Logger): The logger to attach the handler to.
        log_path (str): Path to the log file.
        level (int): Logging level for this file handler (e.g., logging.ERROR).
        max_bytes (int): Maximum file size before rotating.
        backup_count (int): Number of backup files to keep.
        filter_by_name (str, optional): Only log messages from loggers with this name.

    Returns:
        RotatingFileHandler: The handler that was attached.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_LOG_DATEFMT))

    if filter_by_name:
        file_handler.addFilter(NameFilter(filter_by_name))

    logger.addHandler(file_handler)
    return file_handler
