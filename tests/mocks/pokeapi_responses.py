"""Mock responses for PokeAPI calls.

These mocks allow testing without making real PokeAPI calls.
"""

from typing import Any

BASE_URL = "https://pokeapi.co/api/v2"

ARTWORK = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/"
    "sprites/pokemon/other/official-artwork"
)


def list_item(name: str, pokemon_id: int) -> dict[str, str]:
    return {"name": name, "url": f"{BASE_URL}/pokemon/{pokemon_id}/"}


# =============================================================================
# GET /pokemon?offset=0&limit=20
# =============================================================================

POKEMON_LIST_RESPONSE: dict[str, Any] = {
    "count": 1302,
    "next": f"{BASE_URL}/pokemon?offset=20&limit=20",
    "previous": None,
    "results": [
        list_item("bulbasaur", 1),
        list_item("ivysaur", 2),
        list_item("venusaur", 3),
    ],
}

# =============================================================================
# GET /pokemon?offset=0&limit=2000 (search superset)
# =============================================================================

POKEMON_SUPERSET_RESPONSE: dict[str, Any] = {
    "count": 1302,
    "next": f"{BASE_URL}/pokemon?offset=2000&limit=2000",
    "previous": None,
    "results": [
        list_item("bulbasaur", 1),
        list_item("ivysaur", 2),
        list_item("venusaur", 3),
        list_item("charmander", 4),
        list_item("pikachu", 25),
        list_item("raichu", 26),
        list_item("Megasaur-Custom", 10100),
        {"name": "missingno", "url": f"{BASE_URL}/pokemon/missingno/"},
    ],
}

# =============================================================================
# GET /pokemon/1
# =============================================================================

POKEMON_DETAIL_RESPONSE: dict[str, Any] = {
    "id": 1,
    "name": "bulbasaur",
    "height": 7,
    "weight": 69,
    "sprites": {
        "front_default": f"{BASE_URL}/sprites/pokemon/1.png",
        "back_default": f"{BASE_URL}/sprites/pokemon/back/1.png",
        "other": {
            "official-artwork": {"front_default": f"{ARTWORK}/1.png"},
            "dream_world": {"front_default": f"{BASE_URL}/sprites/dream/1.svg"},
        },
    },
    "types": [
        {"slot": 1, "type": {"name": "grass", "url": f"{BASE_URL}/type/12/"}},
        {"slot": 2, "type": {"name": "poison", "url": f"{BASE_URL}/type/4/"}},
    ],
    "abilities": [
        {
            "ability": {"name": "overgrow", "url": f"{BASE_URL}/ability/65/"},
            "is_hidden": False,
            "slot": 1,
        },
        {
            "ability": {"name": "chlorophyll", "url": f"{BASE_URL}/ability/34/"},
            "is_hidden": True,
            "slot": 3,
        },
    ],
    "moves": [
        {
            "move": {"name": "razor-wind", "url": f"{BASE_URL}/move/13/"},
            "version_group_details": [
                {
                    "level_learned_at": 0,
                    "move_learn_method": {"name": "egg", "url": f"{BASE_URL}/m/2/"},
                    "version_group": {"name": "gold-silver", "url": f"{BASE_URL}/v/3/"},
                }
            ],
        },
        {
            "move": {"name": "swords-dance", "url": f"{BASE_URL}/move/14/"},
            "version_group_details": [],
        },
    ],
    "forms": [{"name": "bulbasaur", "url": f"{BASE_URL}/pokemon-form/1/"}],
}


def detail_with_sprites(sprites: dict[str, Any]) -> dict[str, Any]:
    """Copy of the bulbasaur detail payload with replaced sprites."""
    return {**POKEMON_DETAIL_RESPONSE, "sprites": sprites}
