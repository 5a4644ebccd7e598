"""Loguru sink configuration for applications using envtools."""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from ..utils.env import EnvAccessor

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str | None = "INFO", log_file: str | Path | None = None):
    """Replace loguru's default handler with envtools' console (and file) sinks.

    Args:
        level: Console log level. If None, read from ENVTOOLS_LOG_LEVEL
               (default INFO).
        log_file: Optional log file path. Rotated at midnight, kept 30 days.

    Returns:
        The configured loguru logger

    Raises:
        ValueError: If the level is not a known loguru level. Existing
                    handlers are left untouched.
    """
    if level is None:
        level = EnvAccessor(logger).get_env_or_default("ENVTOOLS_LOG_LEVEL", "INFO")
    level = level.upper()

    # Unknown levels raise ValueError here, while the current handlers are still in place
    logger.level(level)

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="00:00",  # Rotate at midnight
            retention="30 days",
            level="DEBUG",
            format=FILE_FORMAT,
        )

    logger.debug(f"Logging configured at level {level}")
    return logger
