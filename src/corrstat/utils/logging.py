"""
corrstat Logging System
=======================
Provides consistent, scoped loggers for the package.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import get_config

# Includes the logger name (e.g. [corrstat.correlation.matrix])
CONSOLE_FMT = "[%(name)s] %(levelname)s: %(message)s"

# File format remains detailed with timestamps
FILE_FMT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Global state to manage shared file logging across modules
_KNOWN_LOGGERS: List[logging.Logger] = []
_SHARED_FILE_HANDLER: Optional[logging.FileHandler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Creates or retrieves a logger with specific formatting and handlers.

    All loggers created through this function share the same file handler
    once it's set up by `setup_file_logging`.

    Args:
        name: Dot-separated module name (e.g., 'corrstat.descriptive').
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter it down
    logger.propagate = False  # Don't double-log to root

    if logger not in _KNOWN_LOGGERS:
        _KNOWN_LOGGERS.append(logger)

    # 1. Console handler (ensure one exists)
    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    if not has_console:
        c_handler = logging.StreamHandler(sys.stderr)
        c_handler.setLevel(get_config().console_level)
        c_handler.setFormatter(logging.Formatter(CONSOLE_FMT))
        logger.addHandler(c_handler)

    # 2. Attach shared file handler if it already exists
    if _SHARED_FILE_HANDLER and _SHARED_FILE_HANDLER not in logger.handlers:
        logger.addHandler(_SHARED_FILE_HANDLER)

    return logger


def setup_file_logging(log_dir: Path, file_level: int = logging.DEBUG) -> Path:
    """
    Initializes the shared file logger for every corrstat logger.

    Args:
        log_dir: The directory where the log file will be created.
        file_level: The logging level for the file.

    Returns:
        Path of the log file.
    """
    global _SHARED_FILE_HANDLER

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "corrstat.log"

    new_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    new_handler.setLevel(file_level)
    new_handler.setFormatter(logging.Formatter(FILE_FMT))

    old_handler = _SHARED_FILE_HANDLER
    _SHARED_FILE_HANDLER = new_handler

    for known in _KNOWN_LOGGERS:
        if old_handler and old_handler in known.handlers:
            known.removeHandler(old_handler)
        known.addHandler(new_handler)

    # Close the old handler to release the file
    if old_handler:
        old_handler.close()

    get_logger("corrstat").info(f"File logging initialized at: {log_file}")
    return log_file


def set_console_level(level: int) -> None:
    """Change the console level of every logger created so far."""
    for known in _KNOWN_LOGGERS:
        for h in known.handlers:
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
                h.setLevel(level)
