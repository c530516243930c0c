"""
Ping Client

Liveness probe against GET /ping.
"""

import httpx

from core.service_client_base import BaseServiceClient


class PingClient(BaseServiceClient):
    """Health check client"""

    service_name = "ping"

    async def health_check(self) -> httpx.Response:
        """GET /ping; a healthy service answers 201 Created"""
        return await self.get("/ping")
