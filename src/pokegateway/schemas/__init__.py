"""Pydantic schemas for the public API."""

from pokegateway.schemas.auth import AuthUser, LoginRequest, LoginResponse
from pokegateway.schemas.common import ErrorResponse
from pokegateway.schemas.pokemon import (
    PokemonAbility,
    PokemonDetail,
    PokemonForm,
    PokemonListItem,
    PokemonListResponse,
    PokemonMove,
    PokemonType,
)

__all__ = [
    "AuthUser",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "PokemonAbility",
    "PokemonDetail",
    "PokemonForm",
    "PokemonListItem",
    "PokemonListResponse",
    "PokemonMove",
    "PokemonType",
]
