"""
Logging configuration for m3trans.
Console output for warnings and errors, with an optional log file for the full run record.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from .config import LOGGING_CONFIG


def _resolve_level(name: Optional[str], fallback: str) -> int:
    level = getattr(logging, (name or fallback).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    return level


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True,
    console_level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Set up logging configuration for the application.

    The package logger is set to the most verbose of its handlers so the
    log file can record INFO messages while the console only shows warnings.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging
        console_level: Level for the console handler (defaults to ``level``)
        log_file: Optional path of a log file to write

    Returns:
        Configured package logger
    """
    log_level = _resolve_level(level, LOGGING_CONFIG["LEVEL"])

    root_logger = logging.getLogger("m3trans")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(_resolve_level(console_level, logging.getLevelName(log_level)))
        console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["CONSOLE_FORMAT"]))
        root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(str(log_file), mode="w", encoding="utf-8")
        file_handler.setLevel(_resolve_level(LOGGING_CONFIG["FILE_LEVEL"], "INFO"))
        file_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        root_logger.addHandler(file_handler)

    if root_logger.handlers:
        root_logger.setLevel(min(log_level, *(h.level for h in root_logger.handlers)))

    # Prevent propagation to root logger
    root_logger.propagate = False

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically the module's short name)

    Returns:
        Logger instance
    """
    # Ensure main logger is set up
    if not logging.getLogger("m3trans").handlers:
        setup_logging()

    return logging.getLogger(f"m3trans.{name}")
