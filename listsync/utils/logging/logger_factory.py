"""
Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-19

logger_factory.py
Logger factory with caching.
Provides centralized logger management with thread-safe operations.
"""

import inspect
import logging
import threading

from listsync.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """
    Thread-safe logger factory with caching.

    Maintains a single logger instance per module name instead of
    re-patching a logger every time a module asks for one.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        if name is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            name = caller.f_globals.get("__name__", "unknown") if caller else "unknown"

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """
    Convenience function for getting cached logger.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance
    """
    return LoggerFactory.get_logger(name)
