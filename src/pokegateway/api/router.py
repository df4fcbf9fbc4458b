"""API main router.

Aggregates all API routers into a single router for inclusion in the app.
"""

from fastapi import APIRouter

from pokegateway.api.auth import router as auth_router
from pokegateway.api.pokemon import router as pokemon_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["Auth"])
router.include_router(pokemon_router, prefix="/pokemons", tags=["Pokemon"])
