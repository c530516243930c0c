#!/usr/bin/env python3
"""Booking service run configuration

Where the suite points, which credentials it uses, and how long it waits.
Base URL, timeouts, parallelism and retry count are fixed for a run; they are
never negotiated with the service.
"""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://restful-booker.herokuapp.com"


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default

def _optional_int(val: Optional[str]) -> Optional[int]:
    try:
        return int(val) if val else None
    except ValueError:
        return None


@dataclass(frozen=True)
class BookerConfig:
    """Booking service endpoint, credentials and run settings"""

    # ===========================================
    # Endpoint
    # ===========================================
    base_url: str = DEFAULT_BASE_URL

    # ===========================================
    # Credentials
    # ===========================================
    auth_username: str = "admin"
    auth_password: str = "password123"
    auth_invalid_username: str = "invaliduser"
    auth_invalid_password: str = "wrongpassword"

    # ===========================================
    # Timeouts (seconds)
    # ===========================================
    request_timeout: float = 10.0
    test_timeout: float = 30.0
    global_timeout: float = 600.0

    # ===========================================
    # Runner
    # ===========================================
    ci: bool = False
    workers: int = 4
    retries: int = 0
    random_seed: Optional[int] = None
    skip_api_tests: bool = False

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> 'BookerConfig':
        """Load run configuration from environment variables"""
        ci = bool(os.getenv("CI"))
        return cls(
            base_url=os.getenv("BOOKER_BASE_URL", DEFAULT_BASE_URL),

            auth_username=os.getenv("AUTH_USERNAME", "admin"),
            auth_password=os.getenv("AUTH_PASSWORD", "password123"),
            auth_invalid_username=os.getenv("AUTH_INVALID_USERNAME", "invaliduser"),
            auth_invalid_password=os.getenv("AUTH_INVALID_PASSWORD", "wrongpassword"),

            request_timeout=_float(os.getenv("BOOKER_REQUEST_TIMEOUT", ""), 10.0),
            test_timeout=_float(os.getenv("BOOKER_TEST_TIMEOUT", ""), 30.0),
            global_timeout=_float(os.getenv("BOOKER_GLOBAL_TIMEOUT", ""), 600.0),

            ci=ci,
            workers=_int(os.getenv("BOOKER_WORKERS", ""), 1 if ci else 4),
            retries=_int(os.getenv("BOOKER_RETRIES", ""), 2 if ci else 0),
            random_seed=_optional_int(os.getenv("BOOKER_RANDOM_SEED")),
            skip_api_tests=_bool(os.getenv("SKIP_API_TESTS", "false")),
        )
