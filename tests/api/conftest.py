"""
API Test Layer Configuration

Contract tests against the live booking service.
- No mocking - validates actual HTTP contracts
- Skipped as a whole when SKIP_API_TESTS is set or GET /ping fails

Usage:
    pytest tests/api -v                        # Run all API tests
    pytest tests/api -v -k "update"            # Run update contract tests
    BOOKER_RANDOM_SEED=42 pytest tests/api     # Reproducible test data
"""

import random
from typing import AsyncGenerator, Dict

import httpx
import pytest
import pytest_asyncio

from core.config import BookerConfig
from restful_booker import AuthClient, BookingClient, Credentials, PingClient
from tests.contracts.booking import APIAssertions, BookingTestDataFactory, BookingValidators


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def http_client(booker_config: BookerConfig) -> AsyncGenerator[httpx.AsyncClient, None]:
    """One AsyncClient per test, shared by the resource clients"""
    async with httpx.AsyncClient(
        timeout=booker_config.request_timeout,
        headers={"Accept": "application/json"},
    ) as client:
        yield client


@pytest.fixture
def auth_api(booker_config: BookerConfig, http_client: httpx.AsyncClient) -> AuthClient:
    """Auth endpoint client"""
    return AuthClient(booker_config, client=http_client)


@pytest.fixture
def booking_api(booker_config: BookerConfig, http_client: httpx.AsyncClient) -> BookingClient:
    """Booking resource client"""
    return BookingClient(booker_config, client=http_client)


@pytest.fixture
def ping_api(booker_config: BookerConfig, http_client: httpx.AsyncClient) -> PingClient:
    """Health check client"""
    return PingClient(booker_config, client=http_client)


# =============================================================================
# Credentials and Tokens
# =============================================================================


@pytest.fixture
def valid_credentials(booker_config: BookerConfig) -> Credentials:
    return Credentials(
        username=booker_config.auth_username,
        password=booker_config.auth_password,
    )


@pytest.fixture
def invalid_credentials(booker_config: BookerConfig) -> Credentials:
    return Credentials(
        username=booker_config.auth_invalid_username,
        password=booker_config.auth_invalid_password,
    )


@pytest_asyncio.fixture
async def auth_token(auth_api: AuthClient, valid_credentials: Credentials) -> str:
    """
    A fresh token for the configured credentials.

    Raises TokenUnavailableError during setup when the service issues no
    token, so dependent tests are reported as errors rather than failures.
    """
    result = await auth_api.get_valid_token(valid_credentials)
    return result.unwrap()


# =============================================================================
# Test Data
# =============================================================================


@pytest.fixture
def factory(booker_config: BookerConfig, request) -> BookingTestDataFactory:
    """Booking payload factory, seeded per test when BOOKER_RANDOM_SEED is set"""
    if booker_config.random_seed is None:
        return BookingTestDataFactory()
    return BookingTestDataFactory(rng=random.Random(f"{booker_config.random_seed}:{request.node.nodeid}"))


@pytest_asyncio.fixture
async def created_booking(booking_api: BookingClient, factory: BookingTestDataFactory) -> Dict:
    """
    A booking created through the API for this test.

    Returns:
        {"bookingid": int, "booking": dict} as sent, with the assigned id
    """
    payload = factory.make_valid_booking()
    response = await booking_api.create_booking(payload)
    created = BookingValidators.assert_valid_create_booking_response_schema(response)
    return {"bookingid": created.bookingid, "booking": payload}


# =============================================================================
# Assertion Helpers
# =============================================================================


@pytest.fixture
def api_assert() -> APIAssertions:
    """Provide API assertion helpers"""
    return APIAssertions()
