"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-02-02

Provides utility functions for working with loggers in a safe and consistent way.
Labels such as " ★new!" end up in log messages, so every logger returned here
falls back to ASCII when the console cannot encode a character.

Functions:
get_logger(name): Returns a patched logger with UTF-8-safe logging methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message safely, falling back to ASCII if needed.
DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console,
while still allowing them to be stored in file logs.
"""

import logging
import re
from functools import partial

from extstore.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
    "★": "*",  # black star
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """
    Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.
    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message: str, *args, **kwargs):
    """
    Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message (str): The message to log.
    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger):
    """
    Replaces logger's logging methods with safe_log-wrapped versions.
    """
    for method_name in ["debug", "info", "warning", "error", "critical", "exception"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str = None) -> logging.Logger:
    """
    Returns a logger with the given name, delegating to the root logger for output.
    Patches logging methods to avoid UnicodeEncodeError.

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Configured and patched logger instance
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # The root logger handles all output (console + files)
    logger.propagate = True
    if logger.hasHandlers():
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Hides records logged with ``extra={"dev_only": True}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
