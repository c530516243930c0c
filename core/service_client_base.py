"""
Base Service Client for the booking service

Base class for the resource clients. Handles:
1. Base URL resolution from BookerConfig
2. HTTP client ownership (shared or owned httpx.AsyncClient)
3. Timeouts
4. Per-request logging

Example:
    class PingClient(BaseServiceClient):
        service_name = "ping"

        async def health_check(self):
            return await self.get("/ping")
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

from core.config import BookerConfig

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    Base class for booking service resource clients.

    Pass ``client`` to share one httpx.AsyncClient between several resource
    clients (the caller then owns it). Without it, an AsyncClient is built
    from the config and closed by ``close()``.
    """

    # Subclasses set this, e.g. "booking"
    service_name: str = None

    def __init__(
        self,
        config: BookerConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.config = config
        self.base_url = config.base_url.rstrip('/')

        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(
                timeout=config.request_timeout,
                headers=self._build_default_headers(),
            )
            self._owns_client = True

        logger.debug(
            f"Initialized {self.service_name} client: {self.base_url} "
            f"(owns_client={self._owns_client})"
        )

    def _build_default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"booker-contract-suite/{self.service_name}",
        }

    def url(self, path: str = "") -> str:
        return f"{self.base_url}{path}"

    async def close(self):
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            await self.client.aclose()
            logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP methods
    # ========================================

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request; transport errors and timeouts propagate"""
        url = self.url(path)
        response = await self.client.request(method, url, **kwargs)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)


__all__ = ["BaseServiceClient"]
