"""PokemonService - cache-aside orchestration over PokeAPI.

For every public operation the service builds a deterministic cache key,
tries the cache, and on a miss calls the upstream client, transforms the
raw payload into the public schema and stores the result with the
configured TTL.

Upstream failures propagate unchanged and are never cached. Concurrent
misses on the same key are not coalesced: both callers hit upstream and the
last write wins.
"""

import structlog

from pokegateway.schemas.pokemon import PokemonDetail, PokemonListResponse
from pokegateway.services.cache import TTLCache
from pokegateway.services.pokeapi import PokeApiClient
from pokegateway.services.transform import transform_detail, transform_list_item

logger = structlog.get_logger(__name__)


class PokemonService:
    """Cached read access to the creature catalog.

    Usage:
        ```python
        service = PokemonService(cache, client, ttl_seconds=3600)
        page = await service.get_list(offset=0, limit=20)
        hits = await service.get_list(0, 20, search="saur")
        bulbasaur = await service.get_by_id(1)
        ```
    """

    DEFAULT_SEARCH_SUPERSET_SIZE = 2000

    def __init__(
        self,
        cache: TTLCache,
        client: PokeApiClient,
        ttl_seconds: int,
        search_superset_size: int = DEFAULT_SEARCH_SUPERSET_SIZE,
    ) -> None:
        """Initialize the service.

        Args:
            cache: Cache shared by every request of this process
            client: Upstream PokeAPI client
            ttl_seconds: TTL applied to every cache write
            search_superset_size: Records fetched in one call for search
        """
        self.cache = cache
        self.client = client
        self.ttl_seconds = ttl_seconds
        self.search_superset_size = search_superset_size

    async def get_list(
        self, offset: int, limit: int, search: str | None = None
    ) -> PokemonListResponse:
        """Get a page of the catalog, or search results when ``search`` is set.

        ``offset`` and ``limit`` are expected to be validated by the caller.
        With a search term the upstream list is fetched as one large
        superset and filtered here by name or ID substring; pagination
        metadata is then meaningless and returned as None.

        Raises:
            PokeApiError: On upstream failures
        """
        if search and search.strip():
            return await self._search(search)

        cache_key = TTLCache.list_key(offset, limit)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("pokemon_list_cache_hit", cache_key=cache_key)
            return cached

        logger.debug("pokemon_list_cache_miss", cache_key=cache_key)
        raw = await self.client.list_pokemon(offset, limit)

        response = PokemonListResponse(
            count=raw["count"],
            next=raw.get("next"),
            previous=raw.get("previous"),
            results=[transform_list_item(item) for item in raw.get("results", [])],
        )
        self.cache.set(cache_key, response, self.ttl_seconds)
        return response

    async def get_by_id(self, pokemon_id: int) -> PokemonDetail:
        """Get the full record for one entry.

        Raises:
            PokeApiNotFoundError: If upstream has no such entry
            PokeApiError: On other upstream failures
        """
        cache_key = TTLCache.detail_key(pokemon_id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("pokemon_detail_cache_hit", cache_key=cache_key)
            return cached

        logger.debug("pokemon_detail_cache_miss", cache_key=cache_key)
        raw = await self.client.get_pokemon(pokemon_id)

        detail = transform_detail(raw)
        self.cache.set(cache_key, detail, self.ttl_seconds)
        return detail

    async def _search(self, search: str) -> PokemonListResponse:
        cache_key = TTLCache.search_key(search)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("pokemon_search_cache_hit", cache_key=cache_key)
            return cached

        logger.debug("pokemon_search_cache_miss", cache_key=cache_key)
        raw = await self.client.list_pokemon(0, self.search_superset_size)

        query = search.strip().lower()
        matches = [
            item
            for item in map(transform_list_item, raw.get("results", []))
            if query in item.name.lower() or query in str(item.id)
        ]

        response = PokemonListResponse(
            count=len(matches), next=None, previous=None, results=matches
        )
        logger.info(
            "pokemon_search_completed",
            query=query,
            scanned=len(raw.get("results", [])),
            matched=len(matches),
        )
        self.cache.set(cache_key, response, self.ttl_seconds)
        return response
