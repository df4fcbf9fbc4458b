"""Pytest configuration and fixtures for PokeGateway tests.

This module provides reusable fixtures for:
- Settings overrides
- Test application and async HTTP clients
- Authentication helpers
- A controllable clock for cache expiry
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pokegateway.config import Settings
from pokegateway.main import create_app

# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Create test-specific settings."""
    return Settings(
        app_env="test",  # type: ignore[arg-type]
        debug=True,
        log_level="DEBUG",  # type: ignore[arg-type]
        log_format="console",  # type: ignore[arg-type]
        pokeapi_base_url="https://pokeapi.test/api/v2",
        cache_ttl_seconds=3600,
        cache_cleanup_interval_seconds=0,
        jwt_secret_key="test-jwt-secret-key",  # type: ignore[arg-type]
        auth_username="admin",
        auth_password="admin",  # type: ignore[arg-type]
    )


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create a test FastAPI application with test settings."""
    return create_app(settings=test_settings)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing.

    This client makes requests to the test app without starting a server.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def auth_token(app: FastAPI) -> str:
    """Return a valid bearer token for the configured account."""
    return app.state.auth_service.generate_token("admin")


@pytest.fixture
async def authenticated_client(
    app: FastAPI, auth_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async client that sends a valid bearer token.

    Usage:
        async def test_protected_endpoint(authenticated_client: AsyncClient):
            response = await authenticated_client.get("/pokemons")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {auth_token}"},
    ) as client:
        yield client


# =============================================================================
# Helper Fixtures
# =============================================================================


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
