"""
Restful Booker clients

Thin resource clients for the booking service under test. Each method maps
one domain operation to one HTTP call and returns the raw httpx.Response.
"""

from .auth_client import AuthClient
from .booking_client import BookingClient
from .ping_client import PingClient
from .models import BookingFilters, Credentials, ResponseFormat, TokenResult
from .exceptions import BookerClientError, TokenUnavailableError

__all__ = [
    "AuthClient",
    "BookingClient",
    "PingClient",
    "BookingFilters",
    "Credentials",
    "ResponseFormat",
    "TokenResult",
    "BookerClientError",
    "TokenUnavailableError",
]
