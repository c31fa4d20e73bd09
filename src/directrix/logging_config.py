"""
Logging Configuration
=====================
Sets up the 'directrix' logger from explicit arguments or, when they are
omitted, from the environment.

Environment:
    DIRECTRIX_LOG_LEVEL: Level name or number ("DEBUG", "info", "10").
        DEBUG logs every focus/directrix move driven by the pointer.
    DIRECTRIX_LOG_FILE: Optional path; the log is also written there.
"""
import logging
import os
import sys
from typing import Mapping, Optional, Union

from directrix.config import (
    DEFAULT_LOG_LEVEL,
    LOG_DATE_FORMAT,
    LOG_FILE_ENV,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
)

PACKAGE_LOGGER = "directrix"


def resolve_log_level(value: Union[int, str, None]) -> int:
    """
    Turn a level name or number into a ``logging`` level.

    Examples:
        >>> resolve_log_level("debug")
        10
        >>> resolve_log_level(" 30 ")
        30
        >>> resolve_log_level(None)
        20

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        value = DEFAULT_LOG_LEVEL
    if isinstance(value, int):
        return value

    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{value}' (set via {LOG_LEVEL_ENV}).")
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'directrix' namespace.

    Args:
        level: Logging level; falls back to DIRECTRIX_LOG_LEVEL, then INFO.
        log_file: Optional log file; falls back to DIRECTRIX_LOG_FILE.
        environ: Mapping read for the fallbacks (defaults to ``os.environ``).

    Returns:
        The configured package logger.
    """
    env = os.environ if environ is None else environ
    resolved = resolve_log_level(level if level is not None else env.get(LOG_LEVEL_ENV))
    log_file = log_file or env.get(LOG_FILE_ENV) or None

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    # Re-running setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        f"Logging initialized at {logging.getLevelName(resolved)}"
        + (f", writing to {log_file}" if log_file else "")
    )
    return logger
