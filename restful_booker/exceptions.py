"""
Restful Booker client errors
"""
from typing import Optional


class BookerClientError(Exception):
    """Base error for the booking service clients"""


class TokenUnavailableError(BookerClientError):
    """The auth endpoint did not issue a token"""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.reason = reason
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Failed to obtain authentication token: {reason}{detail}")
