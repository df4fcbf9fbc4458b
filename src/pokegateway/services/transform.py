"""Mapping of raw PokeAPI payloads to the public schemas.

Pure functions only: no I/O, no cache access. Missing upstream data degrades
to documented defaults instead of raising.
"""

import re
from typing import Any

import structlog

from pokegateway.schemas.pokemon import (
    PokemonAbility,
    PokemonDetail,
    PokemonForm,
    PokemonListItem,
    PokemonMove,
    PokemonType,
)

logger = structlog.get_logger(__name__)

ARTWORK_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/"
    "sprites/pokemon/other/official-artwork/{id}.png"
)

# ID reported for list items whose URL has no numeric trailing segment
UNPARSEABLE_ID = 0

_TRAILING_ID = re.compile(r"/(\d+)/?$")


def extract_id_from_url(url: str) -> int:
    """Parse the trailing numeric path segment of a resource URL.

    ``https://pokeapi.co/api/v2/pokemon/25/`` -> ``25``. Returns
    :data:`UNPARSEABLE_ID` when the URL does not end in a numeric segment.
    """
    match = _TRAILING_ID.search(url or "")
    return int(match.group(1)) if match else UNPARSEABLE_ID


def artwork_url(pokemon_id: int) -> str:
    return ARTWORK_URL_TEMPLATE.format(id=pokemon_id)


def transform_list_item(item: dict[str, Any]) -> PokemonListItem:
    """Map ``{name, url}`` to a list record with a synthesized image URL."""
    url = item.get("url", "")
    pokemon_id = extract_id_from_url(url)
    if pokemon_id == UNPARSEABLE_ID:
        # No artwork link for an ID we could not read
        logger.warning("list_item_id_unparseable", name=item.get("name"), url=url)
        image = None
    else:
        image = artwork_url(pokemon_id)

    return PokemonListItem(id=pokemon_id, name=item["name"], image=image)


def select_image(sprites: dict[str, Any] | None) -> str | None:
    """Official artwork first, then the default front sprite, else None."""
    if not sprites:
        return None
    official = ((sprites.get("other") or {}).get("official-artwork") or {}).get(
        "front_default"
    )
    return official or sprites.get("front_default") or None


def transform_detail(data: dict[str, Any]) -> PokemonDetail:
    """Map a raw ``/pokemon/{id}`` payload to the public detail record.

    Upstream ordering of types, abilities, moves and forms is preserved.
    Move learn-method and version metadata are dropped.
    """
    return PokemonDetail(
        id=data["id"],
        name=data["name"],
        image=select_image(data.get("sprites")),
        types=[PokemonType(name=t["type"]["name"]) for t in data.get("types", [])],
        abilities=[
            PokemonAbility(name=a["ability"]["name"], is_hidden=a.get("is_hidden", False))
            for a in data.get("abilities", [])
        ],
        moves=[PokemonMove(name=m["move"]["name"]) for m in data.get("moves", [])],
        forms=[PokemonForm(name=f["name"]) for f in data.get("forms", [])],
    )
