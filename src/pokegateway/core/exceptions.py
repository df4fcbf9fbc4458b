"""Exception hierarchy for PokeGateway.

Every error that reaches the HTTP boundary derives from
:class:`PokeGatewayError`, which carries a machine-readable ``code``, a
human-readable ``message``, the HTTP ``status_code`` to answer with and
optional ``details``. The exception handlers in ``pokegateway.main`` turn
these into ``{"error": {...}}`` response bodies.

Usage:
    from pokegateway.core.exceptions import PokemonNotFoundError

    raise PokemonNotFoundError(pokemon_id=99999)
"""

from typing import Any


class PokeGatewayError(Exception):
    """Base exception for all PokeGateway errors.

    Attributes:
        code: Machine-readable error code (e.g., "POKEMON_NOT_FOUND")
        message: Human-readable error message
        status_code: HTTP status code to return
        details: Additional error details (optional)
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An unexpected error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message:
            self.message = message
        if code:
            self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, request_id: str | None = None) -> dict[str, Any]:
        """Convert exception to API error response format.

        Args:
            request_id: Request correlation ID

        Returns:
            Error response dictionary
        """
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if request_id:
            error["request_id"] = request_id
        if self.details:
            error["details"] = self.details
        return {"error": error}


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(PokeGatewayError):
    """Base class for resource not found errors."""

    status_code: int = 404


class PokemonNotFoundError(NotFoundError):
    """Raised when the upstream catalog has no record for the requested ID."""

    code: str = "POKEMON_NOT_FOUND"
    message: str = "Pokemon not found"

    def __init__(
        self, pokemon_id: int | str | None = None, message: str | None = None
    ) -> None:
        details: dict[str, Any] = {}
        if pokemon_id is not None:
            details["pokemon_id"] = pokemon_id
            if not message:
                message = f"Pokemon {pokemon_id} not found"

        super().__init__(message=message, details=details if details else None)


# =============================================================================
# Authentication Errors (401)
# =============================================================================


class AuthenticationError(PokeGatewayError):
    """Raised when a protected route is called without credentials."""

    code: str = "AUTHENTICATION_FAILED"
    message: str = "Authentication required"
    status_code: int = 401


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""

    code: str = "INVALID_CREDENTIALS"
    message: str = "Invalid credentials"


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, forged or expired."""

    code: str = "INVALID_TOKEN"
    message: str = "Invalid or expired token"


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(PokeGatewayError):
    """Raised when input validation fails."""

    code: str = "VALIDATION_ERROR"
    message: str = "Validation error"
    status_code: int = 400

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if details is None:
            details = {}
        if field:
            details["field"] = field
        super().__init__(message=message, details=details if details else None)


class InvalidPokemonIdError(ValidationError):
    """Raised when a path ID is not a positive integer."""

    code: str = "INVALID_POKEMON_ID"
    message: str = "Invalid Pokemon ID"

    def __init__(self, raw_id: str | None = None, message: str | None = None) -> None:
        details: dict[str, Any] = {}
        if raw_id is not None:
            details["value"] = raw_id
        super().__init__(message=message, field="id", details=details)


# =============================================================================
# External Service Errors (502, 503)
# =============================================================================


class ExternalServiceError(PokeGatewayError):
    """Raised when the upstream catalog answers with an unexpected status."""

    code: str = "EXTERNAL_SERVICE_ERROR"
    message: str = "External API error"
    status_code: int = 502


class UpstreamUnavailableError(ExternalServiceError):
    """Raised when the upstream catalog cannot be reached or times out."""

    code: str = "UPSTREAM_UNAVAILABLE"
    message: str = "External API unavailable"
    status_code: int = 503
