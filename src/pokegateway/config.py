"""Application configuration using Pydantic Settings.

This module provides centralized configuration management with environment
variable validation, type coercion, and default values.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Application settings with environment variable validation.

    All settings can be overridden via environment variables.
    Sensitive values should be provided via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Application
    # ========================================
    app_env: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    debug: bool = Field(
        default=False,
        description="Starlette debug mode (tracebacks in 500 responses)",
    )
    app_name: str = Field(
        default="PokeGateway",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format (json for production, console for dev)",
    )

    # ========================================
    # Server
    # ========================================
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Server port",
    )
    frontend_url: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origin outside development",
    )

    # ========================================
    # PokeAPI
    # ========================================
    pokeapi_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL of the upstream PokeAPI",
    )
    pokeapi_timeout: float = Field(
        default=10.0,
        gt=0,
        description="PokeAPI request timeout in seconds",
    )

    # ========================================
    # Cache
    # ========================================
    cache_ttl_seconds: int = Field(
        default=3600,
        ge=0,
        description="TTL applied to every cache write, in seconds",
    )
    cache_cleanup_interval_seconds: int = Field(
        default=300,
        ge=0,
        description="Interval of the expired-entry sweep (0 disables it)",
    )
    search_superset_size: int = Field(
        default=2000,
        ge=1,
        description="Number of upstream records fetched for client-side search",
    )

    # ========================================
    # Authentication
    # ========================================
    jwt_secret_key: SecretStr = Field(
        default=SecretStr("dev-secret-key-change-in-production-!!!"),
        description="Secret key for JWT token signing",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_expire_minutes: int = Field(
        default=1440,
        ge=1,
        description="JWT access token expiry in minutes",
    )
    auth_username: str = Field(
        default="admin",
        description="Username accepted by /auth/login",
    )
    auth_password: SecretStr = Field(
        default=SecretStr("admin"),
        description="Password accepted by /auth/login",
    )

    # ========================================
    # Derived Properties
    # ========================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """Check if JSON logging should be used."""
        return self.log_format == LogFormat.JSON or self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    This function is cached to avoid re-reading environment variables
    on every access. Use dependency injection in FastAPI routes.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
