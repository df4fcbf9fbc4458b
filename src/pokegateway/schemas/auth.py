"""Login request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from pokegateway.schemas.common import BaseSchema


class LoginRequest(BaseSchema):
    """Credentials posted to ``/auth/login``.

    Both fields are optional at the schema level so that a missing value is
    answered with the service's own 400 error instead of a 422. Values are
    compared exactly, so whitespace is not stripped.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    username: str | None = Field(None, max_length=200)
    password: str | None = Field(None, max_length=200)


class AuthUser(BaseModel):
    username: str


class LoginResponse(BaseModel):
    """Issued bearer token and the authenticated user."""

    token: str = Field(..., description="Bearer token for protected routes")
    user: AuthUser
