#!/usr/bin/env python3
"""
Logger setup

Configures standard-library loggers from LoggingConfig. Modules keep using
logging.getLogger(__name__); this only attaches handlers and levels.
"""
import logging
from typing import Optional

from core.config import LoggingConfig


def setup_logger(
    name: str,
    config: Optional[LoggingConfig] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a named logger.

    Handlers are attached once; calling again with the same name only
    updates the level.

    Args:
        name: Logger name (usually a package name such as "restful_booker")
        config: Logging configuration, defaults to LoggingConfig.from_env()
        level: Level override (e.g. "DEBUG")

    Returns:
        The configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())

    if getattr(logger, "_booker_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._booker_configured = True
    return logger


__all__ = ["setup_logger"]
