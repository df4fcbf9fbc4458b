"""FastAPI dependency injection container.

Long-lived components (cache, upstream client, services) are constructed
once in ``create_app`` and kept on ``app.state``. The functions below hand
them to routes through ``Depends()`` so tests can swap any of them with
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pokegateway.config import Settings
from pokegateway.core.exceptions import AuthenticationError
from pokegateway.services.auth import AuthService
from pokegateway.services.pokemon import PokemonService

bearer_scheme = HTTPBearer(auto_error=False, description="Token from /auth/login")


# ========================================
# Settings Dependencies
# ========================================
def get_settings_from_request(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


# ========================================
# Service Dependencies
# ========================================
def get_pokemon_service(request: Request) -> PokemonService:
    """Get the cache-aside catalog service."""
    return request.app.state.pokemon_service


def get_auth_service(request: Request) -> AuthService:
    """Get the token issuing/verifying service."""
    return request.app.state.auth_service


# ========================================
# Auth Dependencies
# ========================================
async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: 401 if the header is missing
        InvalidTokenError: 401 if the token does not verify

    Returns:
        Username of the authenticated caller
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    claims = auth.verify_token(credentials.credentials)
    return claims["username"]


CurrentUser = Annotated[str, Depends(get_current_user)]
