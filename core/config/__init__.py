#!/usr/bin/env python3
"""Configuration for the booking contract suite

Configuration hierarchy:
- booker_config: Booking service endpoint, credentials, timeouts, runner settings
- logging_config: Logging configuration

Nothing is read at import time. Callers build a config explicitly with
load_settings() and hand it to the clients that need it.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from .booker_config import BookerConfig, DEFAULT_BASE_URL
from .logging_config import LoggingConfig


def load_settings(env_file: Optional[str] = None) -> BookerConfig:
    """Load the env file (without overriding real variables) and build a BookerConfig"""
    load_dotenv(env_file or os.getenv("BOOKER_ENV_FILE", ".env"), override=False)
    return BookerConfig.from_env()


__all__ = [
    'BookerConfig',
    'LoggingConfig',
    'DEFAULT_BASE_URL',
    'load_settings',
]
