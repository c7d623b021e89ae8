"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-02-02

This module provides the ConfigureLogger class for setting up logging in the application.
The root logger is configured to log INFO and higher levels to the console, ERROR and
higher to extstore.log, and DEBUG+ to extstore_debug.log (optional).
Only the application entry point configures logging; library code just asks
the logger factory for a named logger.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from extstore.config import (
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
from extstore.utils.logging.logger_helper import DevOnlyFilter

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """
    Attaches a rotating file handler to a logger.

    Args:
        logger (logging.Logger): The logger to attach the handler to.
        log_path (str): Path to the log file.
        level (int): Logging level for this file handler (e.g., logging.ERROR).
        max_bytes (int): Maximum file size before rotating.
        backup_count (int): Number of backup files to keep.

    Returns:
        RotatingFileHandler: The handler that was added.
    """
    os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


class ConfigureLogger:
    """
    Configures application-wide logging.
    Logs INFO and higher to the console, ERROR and higher to extstore.log,
    and DEBUG and higher to extstore_debug.log when enabled.
    """

    def __init__(
        self,
        log_name: str = "extstore",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
    ):
        """
        Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Whether to log to stdout.
            file_enabled (bool): Whether to log errors to a rotating file.
            debug_enabled (bool): Whether to keep a full debug log file.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.ERROR),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
