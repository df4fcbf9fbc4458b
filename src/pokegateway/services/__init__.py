"""Services package for PokeGateway.

This module exports service classes for business logic.
"""

from pokegateway.services.auth import AuthService
from pokegateway.services.cache import TTLCache, run_cleanup_loop
from pokegateway.services.pokeapi import (
    PokeApiClient,
    PokeApiError,
    PokeApiNotFoundError,
    PokeApiPayloadError,
    PokeApiStatusError,
    PokeApiUnavailableError,
)
from pokegateway.services.pokemon import PokemonService

__all__ = [
    # Auth
    "AuthService",
    # Cache
    "TTLCache",
    "run_cleanup_loop",
    # PokeAPI
    "PokeApiClient",
    "PokeApiError",
    "PokeApiNotFoundError",
    "PokeApiPayloadError",
    "PokeApiStatusError",
    "PokeApiUnavailableError",
    # Catalog
    "PokemonService",
]
