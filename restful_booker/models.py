"""
Restful Booker Models

Request-side value types shared by the resource clients.
"""

import base64
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import TokenUnavailableError


class ResponseFormat(str, Enum):
    """Response representation requested through the Accept header"""
    JSON = "application/json"
    XML = "application/xml"


class Credentials(BaseModel):
    """Username/password pair for token creation or basic auth"""
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")

    def basic_auth_header(self) -> str:
        """Authorization header value for HTTP basic auth"""
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


class BookingFilters(BaseModel):
    """Query filters for GET /booking"""
    model_config = ConfigDict(frozen=True)

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    checkin: Optional[str] = None
    checkout: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class TokenResult(BaseModel):
    """
    Outcome of a token request.

    Either ``token`` is set, or ``reason`` says why no token was issued.
    Call ``unwrap()`` to get the token or raise.
    """
    model_config = ConfigDict(frozen=True)

    token: Optional[str] = None
    reason: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return bool(self.token)

    @classmethod
    def success(cls, token: str, status_code: int = 200) -> 'TokenResult':
        return cls(token=token, status_code=status_code)

    @classmethod
    def failure(cls, reason: str, status_code: Optional[int] = None) -> 'TokenResult':
        return cls(reason=reason, status_code=status_code)

    def unwrap(self) -> str:
        if not self.ok:
            raise TokenUnavailableError(self.reason or "no token issued", self.status_code)
        return self.token


def to_payload(data: Any) -> Any:
    """JSON-ready body from a dict or a pydantic model"""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return data
