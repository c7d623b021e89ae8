"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-02-02

Cached loggers, one per module name. Store widgets are created once per
list row, so they ask here instead of building a logger each time.
"""

import logging
import threading

from extstore.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe cache of the loggers returned by ``get_logger``."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ of the calling module.
                Defaults to the "extstore" package logger.

        Returns:
            logging.Logger: Cached logger instance
        """
        name = name or "extstore"
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)
            return cls._loggers[name]

    @classmethod
    def clear_cache(cls) -> None:
        """Forget every cached logger. Used by tests."""
        with cls._lock:
            cls._loggers.clear()


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Return the cached logger for ``name`` (see ``LoggerFactory.get_logger``)."""
    return LoggerFactory.get_logger(name)
