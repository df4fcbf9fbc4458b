"""Public catalog schemas.

These models are the literal wire contract returned by ``/pokemons``. They
are frozen: the instance stored in the cache is the one handed to callers.
"""

from pydantic import BaseModel, ConfigDict, Field


class FrozenSchema(BaseModel):
    """Immutable response model; serializes by alias."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PokemonListItem(FrozenSchema):
    """A single entry of a catalog page."""

    id: int = Field(..., description="ID parsed from the upstream resource URL")
    name: str
    image: str | None = Field(None, description="Official artwork URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "bulbasaur",
                "image": "https://raw.githubusercontent.com/PokeAPI/sprites/master/"
                "sprites/pokemon/other/official-artwork/1.png",
            }
        }
    )


class PokemonListResponse(FrozenSchema):
    """Catalog page with upstream pagination metadata."""

    count: int = Field(..., ge=0)
    next: str | None = None
    previous: str | None = None
    results: list[PokemonListItem] = Field(default_factory=list)


class PokemonType(FrozenSchema):
    name: str


class PokemonAbility(FrozenSchema):
    name: str
    is_hidden: bool = Field(..., alias="isHidden")


class PokemonMove(FrozenSchema):
    name: str


class PokemonForm(FrozenSchema):
    name: str


class PokemonDetail(FrozenSchema):
    """Full record for a single catalog entry."""

    id: int
    name: str
    image: str | None = None
    types: list[PokemonType] = Field(default_factory=list)
    abilities: list[PokemonAbility] = Field(default_factory=list)
    moves: list[PokemonMove] = Field(default_factory=list)
    forms: list[PokemonForm] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "bulbasaur",
                "image": "https://example.com/official.png",
                "types": [{"name": "grass"}, {"name": "poison"}],
                "abilities": [
                    {"name": "overgrow", "isHidden": False},
                    {"name": "chlorophyll", "isHidden": True},
                ],
                "moves": [{"name": "razor-wind"}],
                "forms": [{"name": "bulbasaur"}],
            }
        }
    )
