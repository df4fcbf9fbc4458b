"""PokeAPI client.

Thin async wrapper over the upstream REST API. It returns the raw JSON
payloads untouched; reshaping and caching belong to ``PokemonService``.

See: https://pokeapi.co/docs/v2#pokemon
"""

from typing import Any

import httpx
import structlog

from pokegateway.config import Settings, get_settings

logger = structlog.get_logger(__name__)


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------


class PokeApiError(Exception):
    """Base exception for PokeAPI errors."""

    pass


class PokeApiNotFoundError(PokeApiError):
    """Upstream answered 404 for the requested resource."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"Resource not found: {resource}")


class PokeApiStatusError(PokeApiError):
    """Upstream answered with a non-2xx status other than 404."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API request failed: {status_code} {reason}".rstrip())


class PokeApiUnavailableError(PokeApiError):
    """Upstream could not be reached or did not answer within the timeout."""

    pass


class PokeApiPayloadError(PokeApiError):
    """Upstream answered 2xx with a body that is not JSON."""

    pass


# -----------------------------------------------------------------------------
# Client
# -----------------------------------------------------------------------------


class PokeApiClient:
    """Async client for PokeAPI.

    The underlying ``httpx.AsyncClient`` is created on first use and reused
    for the life of the process; call :meth:`close` on shutdown.

    Usage:
        ```python
        client = PokeApiClient(settings)
        page = await client.list_pokemon(offset=0, limit=20)
        raw = await client.get_pokemon(25)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._client: httpx.AsyncClient | None = None

    @property
    def _user_agent(self) -> str:
        return f"{self._settings.app_name}/{self._settings.app_version}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._settings.pokeapi_base_url,
                timeout=self._settings.pokeapi_timeout,
                headers={
                    "User-Agent": self._user_agent,
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def list_pokemon(self, offset: int = 0, limit: int = 20) -> dict[str, Any]:
        """Fetch one page of the catalog.

        Returns:
            ``{"count", "next", "previous", "results": [{"name", "url"}]}``

        Raises:
            PokeApiError: On transport or status errors
        """
        return await self._get_json("/pokemon", params={"offset": offset, "limit": limit})

    async def get_pokemon(self, id_or_name: int | str) -> dict[str, Any]:
        """Fetch the raw record for a single entry.

        Args:
            id_or_name: Numeric ID or lowercase name

        Raises:
            PokeApiNotFoundError: If upstream has no such entry
            PokeApiError: On other transport or status errors
        """
        return await self._get_json(f"/pokemon/{id_or_name}")

    async def _get_json(
        self, path: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        client = await self._get_client()

        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 404:
                logger.info("pokeapi_not_found", path=path)
                raise PokeApiNotFoundError(path) from e
            logger.error("pokeapi_request_failed", status_code=status_code, path=path)
            raise PokeApiStatusError(
                status_code, getattr(e.response, "reason_phrase", "")
            ) from e
        except httpx.TimeoutException as e:
            logger.error("pokeapi_timeout", path=path, error=str(e))
            raise PokeApiUnavailableError(f"Request timed out: {path}") from e
        except httpx.RequestError as e:
            logger.error("pokeapi_request_error", path=path, error=str(e))
            raise PokeApiUnavailableError(f"Request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "pokeapi_invalid_payload",
                path=path,
                content_type=response.headers.get("content-type"),
            )
            raise PokeApiPayloadError(f"Invalid JSON from {path}") from e
