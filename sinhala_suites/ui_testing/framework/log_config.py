"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the suite.

The level, format and optional log file come from the `logging` section of
config/config.yaml (LOGGING_LEVEL / LOGGING_FILE override them).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
) -> None:
    """
    Initialize the global Loguru logger once per process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        config: ConfigLoader to read the `logging` section from
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or ConfigLoader()
    log_level = (level or config.get("logging.level", "INFO")).upper()
    log_format = format_str or config.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow `init_logger` to run again (used by tests and the CLI)."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]
