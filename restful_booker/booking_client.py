"""
Booking Client

One method per booking operation, one HTTP call per method.
"""

import httpx
from typing import Any, Dict, Mapping, Optional, Union

from core.service_client_base import BaseServiceClient
from .models import BookingFilters, Credentials, ResponseFormat, to_payload

FiltersLike = Union[BookingFilters, Mapping[str, Any]]


class BookingClient(BaseServiceClient):
    """Booking resource client"""

    service_name = "booking"

    @staticmethod
    def _auth_headers(
        token: Optional[str] = None,
        basic_auth: Optional[Credentials] = None,
    ) -> Dict[str, str]:
        """Token cookie wins over basic auth; neither means unauthenticated"""
        if token:
            return {"Cookie": f"token={token}"}
        if basic_auth:
            return {"Authorization": basic_auth.basic_auth_header()}
        return {}

    # =============================================================================
    # Reads
    # =============================================================================

    async def get_booking_ids(
        self,
        filters: Optional[FiltersLike] = None,
        fmt: ResponseFormat = ResponseFormat.JSON,
    ) -> httpx.Response:
        """GET /booking with optional firstname/lastname/checkin/checkout filters"""
        if isinstance(filters, BookingFilters):
            params = filters.to_params()
        else:
            params = {k: v for k, v in (filters or {}).items() if v is not None}

        return await self.get(
            "/booking",
            headers={"Accept": ResponseFormat(fmt).value},
            params=params,
        )

    async def get_booking(
        self,
        booking_id: Union[int, str],
        fmt: ResponseFormat = ResponseFormat.JSON,
    ) -> httpx.Response:
        """GET /booking/{id}"""
        return await self.get(
            f"/booking/{booking_id}",
            headers={"Accept": ResponseFormat(fmt).value},
        )

    # =============================================================================
    # Writes
    # =============================================================================

    async def create_booking(
        self,
        booking: Any,
        fmt: ResponseFormat = ResponseFormat.JSON,
    ) -> httpx.Response:
        """POST /booking, no authentication required"""
        return await self.post(
            "/booking",
            headers={
                "Content-Type": "application/json",
                "Accept": ResponseFormat(fmt).value,
            },
            json=to_payload(booking),
        )

    async def update_booking(
        self,
        booking_id: Union[int, str],
        booking: Any,
        token: Optional[str] = None,
        basic_auth: Optional[Credentials] = None,
        fmt: ResponseFormat = ResponseFormat.JSON,
    ) -> httpx.Response:
        """PUT /booking/{id} with token cookie or basic auth"""
        headers = {
            "Content-Type": "application/json",
            "Accept": ResponseFormat(fmt).value,
        }
        headers.update(self._auth_headers(token, basic_auth))

        return await self.put(
            f"/booking/{booking_id}",
            headers=headers,
            json=to_payload(booking),
        )

    async def delete_booking(
        self,
        booking_id: Union[int, str],
        token: Optional[str] = None,
        basic_auth: Optional[Credentials] = None,
    ) -> httpx.Response:
        """DELETE /booking/{id} with token cookie or basic auth"""
        headers = {"Content-Type": "application/json"}
        headers.update(self._auth_headers(token, basic_auth))

        return await self.delete(f"/booking/{booking_id}", headers=headers)
