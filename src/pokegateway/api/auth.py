"""Authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pokegateway.core.exceptions import ValidationError
from pokegateway.dependencies import get_auth_service
from pokegateway.schemas.auth import LoginRequest, LoginResponse
from pokegateway.schemas.common import ErrorResponse
from pokegateway.services.auth import AuthService

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in",
    description="Exchange username and password for a bearer token.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing credentials"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Issue a bearer token for the configured account."""
    if not request.username or not request.password:
        raise ValidationError(message="Username and password are required")

    return auth.login(request.username, request.password)
