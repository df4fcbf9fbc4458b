"""Catalog list, search and lookup endpoints.

Query and path values are validated here, before ``PokemonService`` is
called. Upstream errors raised by the service are translated into the
application's exception hierarchy.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from pokegateway.core.exceptions import (
    ExternalServiceError,
    InvalidPokemonIdError,
    PokemonNotFoundError,
    UpstreamUnavailableError,
)
from pokegateway.core.logging import get_logger
from pokegateway.dependencies import CurrentUser, get_pokemon_service
from pokegateway.schemas.common import ErrorResponse
from pokegateway.schemas.pokemon import PokemonDetail, PokemonListResponse
from pokegateway.services.pokeapi import (
    PokeApiError,
    PokeApiNotFoundError,
    PokeApiStatusError,
    PokeApiUnavailableError,
)
from pokegateway.services.pokemon import PokemonService

logger = get_logger(__name__)

router = APIRouter()

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


# =============================================================================
# Boundary Validation
# =============================================================================


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_offset(raw: str | None) -> int:
    """Offset from the query string; absent, invalid or negative -> 0."""
    value = _parse_int(raw)
    return max(value, 0) if value is not None else 0


def parse_limit(raw: str | None) -> int:
    """Limit from the query string, defaulted to 20 and capped at 100."""
    value = _parse_int(raw)
    if value is None or value < 1:
        return DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


def parse_pokemon_id(raw: str) -> int:
    """Path ID as a positive integer.

    Raises:
        InvalidPokemonIdError: If ``raw`` is not a positive integer
    """
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise InvalidPokemonIdError(raw_id=raw)
    return int(raw)


def _translate_upstream_error(error: PokeApiError, **context: object) -> Exception:
    if isinstance(error, PokeApiNotFoundError):
        return PokemonNotFoundError(pokemon_id=context.get("pokemon_id"))
    if isinstance(error, PokeApiUnavailableError):
        return UpstreamUnavailableError(details={"error": str(error)})
    if isinstance(error, PokeApiStatusError):
        return ExternalServiceError(
            details={"upstream_status": error.status_code, "error": str(error)}
        )
    return ExternalServiceError(details={"error": str(error)})


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "",
    response_model=PokemonListResponse,
    status_code=status.HTTP_200_OK,
    summary="List or search Pokemon",
    description=(
        "Paginated catalog list. With `search`, returns every entry whose "
        "name or ID contains the term (not paginated)."
    ),
    responses={
        200: {"description": "Catalog page"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        502: {"model": ErrorResponse, "description": "External service error"},
        503: {"model": ErrorResponse, "description": "External service unavailable"},
    },
)
async def list_pokemons(
    user: CurrentUser,
    pokemon: Annotated[PokemonService, Depends(get_pokemon_service)],
    offset: Annotated[str | None, Query(description="Items to skip")] = None,
    limit: Annotated[str | None, Query(description="Page size (1-100)")] = None,
    search: Annotated[str | None, Query(description="Name or ID fragment")] = None,
) -> PokemonListResponse:
    """Get a page of the catalog."""
    page_offset = parse_offset(offset)
    page_limit = parse_limit(limit)
    term = search.strip() if search and search.strip() else None

    logger.info(
        "list_pokemons_request",
        offset=page_offset,
        limit=page_limit,
        search=term,
        user=user,
    )

    try:
        return await pokemon.get_list(page_offset, page_limit, term)
    except PokeApiError as e:
        logger.error("list_pokemons_failed", error=str(e))
        raise _translate_upstream_error(e) from e


@router.get(
    "/{pokemon_id}",
    response_model=PokemonDetail,
    status_code=status.HTTP_200_OK,
    summary="Get Pokemon details",
    description="Full record for a single catalog entry by numeric ID.",
    responses={
        200: {"description": "Pokemon details"},
        400: {"model": ErrorResponse, "description": "Invalid ID"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Pokemon not found"},
        502: {"model": ErrorResponse, "description": "External service error"},
        503: {"model": ErrorResponse, "description": "External service unavailable"},
    },
)
async def get_pokemon(
    pokemon_id: str,
    user: CurrentUser,
    pokemon: Annotated[PokemonService, Depends(get_pokemon_service)],
) -> PokemonDetail:
    """Get one catalog entry."""
    parsed_id = parse_pokemon_id(pokemon_id)

    logger.info("get_pokemon_request", pokemon_id=parsed_id, user=user)

    try:
        return await pokemon.get_by_id(parsed_id)
    except PokeApiNotFoundError as e:
        logger.warning("get_pokemon_not_found", pokemon_id=parsed_id)
        raise _translate_upstream_error(e, pokemon_id=parsed_id) from e
    except PokeApiError as e:
        logger.error("get_pokemon_failed", pokemon_id=parsed_id, error=str(e))
        raise _translate_upstream_error(e, pokemon_id=parsed_id) from e
