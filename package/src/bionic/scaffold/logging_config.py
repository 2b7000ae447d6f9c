"""
Bionic Logging Configuration

Configurable logging with debug mode support.
"""

import os
import logging
import sys
from pathlib import Path
from typing import Optional


# Check for debug mode
DEBUG_MODE = os.environ.get("BIONIC_DEBUG", "").lower() in ("1", "true", "yes")

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_level() -> Optional[int]:
    """Read BIONIC_LOG_LEVEL, ignoring unknown names."""
    name = os.environ.get("BIONIC_LOG_LEVEL", "").upper()
    if name in LEVEL_NAMES:
        return getattr(logging, name)
    return None


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if BIONIC_DEBUG, else
            BIONIC_LOG_LEVEL, else WARNING)
        log_file: Optional path to log file
        quiet: If True, suppress console output

    Returns:
        Configured logger
    """
    if level is None:
        if DEBUG_MODE:
            level = logging.DEBUG
        else:
            level = _env_level() or logging.WARNING

    logger = logging.getLogger("bionic")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        if DEBUG_MODE or level <= logging.DEBUG:
            console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        else:
            console_format = "%(message)s"

        console_handler.setFormatter(logging.Formatter(console_format))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "bionic") -> logging.Logger:
    """Get a logger under the bionic namespace.

    Args:
        name: Logger name (will be prefixed with 'bionic.')

    Returns:
        Logger instance
    """
    if not name.startswith("bionic"):
        name = f"bionic.{name}"
    return logging.getLogger(name)
