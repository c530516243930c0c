"""
Auth Client

Token creation against POST /auth.
"""

import httpx
import logging
from typing import Optional

from core.service_client_base import BaseServiceClient
from .models import Credentials, TokenResult

logger = logging.getLogger(__name__)


class AuthClient(BaseServiceClient):
    """Auth endpoint client"""

    service_name = "auth"

    async def create_token(self, credentials: Credentials) -> httpx.Response:
        """
        Create an authentication token.

        POST /auth

        Args:
            credentials: Username and password

        Returns:
            Raw response; the caller validates it
        """
        return await self.post(
            "/auth",
            headers={"Content-Type": "application/json"},
            json=credentials.model_dump(),
        )

    async def get_valid_token(self, credentials: Optional[Credentials] = None) -> TokenResult:
        """
        Request a token and report the outcome without raising.

        Args:
            credentials: Defaults to the configured valid credentials

        Returns:
            TokenResult holding the token, or the reason none was issued

        Example:
            >>> result = await auth.get_valid_token()
            >>> token = result.unwrap()
        """
        credentials = credentials or Credentials(
            username=self.config.auth_username,
            password=self.config.auth_password,
        )

        try:
            response = await self.create_token(credentials)
        except httpx.HTTPError as e:
            logger.error(f"Error requesting token: {e}")
            return TokenResult.failure(f"transport error: {e}")

        if not response.is_success:
            logger.warning(f"Token request rejected: {response.status_code}")
            return TokenResult.failure("non-success status", response.status_code)

        try:
            body = response.json()
        except ValueError:
            logger.warning("Token response body is not JSON")
            return TokenResult.failure("response body is not JSON", response.status_code)

        token = body.get("token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            reason = body.get("reason") if isinstance(body, dict) else None
            if not isinstance(reason, str) or not reason:
                reason = None
            logger.warning(f"No token in response: {reason or body!r}")
            return TokenResult.failure(reason or "token field missing", response.status_code)

        return TokenResult.success(token, response.status_code)
