"""AuthService - single-account login and JWT bearer tokens.

Tokens are signed with the configured secret (HS256 by default) and expire
after ``JWT_EXPIRE_MINUTES``. The catalog services know nothing about
identity; only the HTTP boundary calls into this module.
"""

import hmac
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
import structlog

from pokegateway.config import Settings
from pokegateway.core.exceptions import InvalidCredentialsError, InvalidTokenError
from pokegateway.schemas.auth import AuthUser, LoginResponse

logger = structlog.get_logger(__name__)


class AuthService:
    """Issue and verify access tokens.

    Usage:
        ```python
        auth = AuthService(settings)
        result = auth.login("admin", "admin")
        claims = auth.verify_token(result.token)
        ```
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def _secret(self) -> str:
        return self._settings.jwt_secret_key.get_secret_value()

    def validate_credentials(self, username: str, password: str) -> bool:
        """Compare against the configured account in constant time."""
        expected_password = self._settings.auth_password.get_secret_value()
        username_ok = hmac.compare_digest(
            username.encode(), self._settings.auth_username.encode()
        )
        password_ok = hmac.compare_digest(password.encode(), expected_password.encode())
        return username_ok and password_ok

    def generate_token(self, username: str) -> str:
        now = datetime.now(UTC)
        payload = {
            "sub": username,
            "username": username,
            "iat": now,
            "exp": now + timedelta(minutes=self._settings.jwt_expire_minutes),
        }
        return jwt.encode(payload, self._secret, algorithm=self._settings.jwt_algorithm)

    def verify_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a bearer token.

        Returns:
            The token claims; ``claims["username"]`` identifies the caller.

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as e:
            logger.info("token_rejected", reason=type(e).__name__)
            raise InvalidTokenError() from e

        if "username" not in claims:
            claims["username"] = claims["sub"]
        return claims

    def login(self, username: str, password: str) -> LoginResponse:
        """Exchange credentials for a token.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        if not self.validate_credentials(username, password):
            logger.warning("login_failed", username=username)
            raise InvalidCredentialsError()

        logger.info("login_succeeded", username=username)
        return LoginResponse(
            token=self.generate_token(username), user=AuthUser(username=username)
        )
