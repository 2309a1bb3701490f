"""Logging configuration for the addon mirror.

Diagnostics go to stderr, optionally mirrored to a log file so that each
run leaves an auditable record.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "addon_mirror"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the handlers of an earlier call.

    Args:
        level: Logging level.
        log_file: Also append every record to this file.
        format_string: Record format.

    Returns:
        The package logger.
    """
    formatter = logging.Formatter(format_string)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module, e.g. "services.mirror"."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
