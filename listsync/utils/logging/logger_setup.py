"""
Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-19

logger_setup.py
This module provides the ConfigureLogger class for setting up logging in the application.
The root logger is configured to log INFO and higher to the console, file-level records
to a rotating <name>_<timestamp>.log, and DEBUG+ to <name>_debug_<timestamp>.log when
the debug file is enabled in listsync.config.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from listsync.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from listsync.utils.logging.logger_file_helper import add_file_handler
from listsync.utils.logging.logger_helper import DevOnlyFilter

CONFIGURED_HANDLER_ATTR = "_listsync_configured"


def configured_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the handlers on logger that were installed by ConfigureLogger."""
    return [h for h in logger.handlers if getattr(h, CONFIGURED_HANDLER_ATTR, False)]


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger (or a named one).
    Handlers are only installed once; a second instance leaves an
    already-configured logger untouched.
    """

    def __init__(
        self,
        log_name: str = "app",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        logger_name: str | None = None,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log file.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a stdout handler.
            file_enabled (bool): Attach the rotating session log file.
            debug_enabled (bool): Attach the rotating debug log file.
            logger_name (str, optional): Logger to configure; the root logger if omitted.
        """
        console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        file_level = getattr(logging, LOG_FILE_LEVEL, logging.ERROR)

        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        # Handlers attached by other code (test harnesses, libraries) do not count
        if configured_handlers(self.logger):
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(console_level)

        if file_enabled:
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            self._tag(
                add_file_handler(
                    logger=self.logger,
                    log_path=self.log_file_path,
                    level=file_level,
                    max_bytes=LOG_FILE_MAX_BYTES,
                    backup_count=LOG_FILE_BACKUP_COUNT,
                )
            )

        if debug_enabled:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            self._tag(
                add_file_handler(
                    logger=self.logger,
                    log_path=self.debug_file_path,
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(self._tag(console_handler))

    @staticmethod
    def _tag(handler: logging.Handler) -> logging.Handler:
        setattr(handler, CONFIGURED_HANDLER_ATTR, True)
        return handler
