"""FastAPI application factory for PokeGateway.

This module creates and configures the FastAPI application with:
- Construction of the cache, upstream client and services
- Lifespan management (cache sweep task, HTTP client shutdown)
- Middleware configuration (CORS, request ID, logging)
- Exception handlers
- API routers
"""

import asyncio
import contextlib
import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokegateway.config import Settings, get_settings
from pokegateway.core.exceptions import PokeGatewayError
from pokegateway.dependencies import get_settings_from_request
from pokegateway.core.logging import (
    clear_correlation_id,
    configure_logging,
    get_logger,
    set_correlation_id,
)
from pokegateway.schemas.common import HealthResponse, ServiceInfoResponse
from pokegateway.services.auth import AuthService
from pokegateway.services.cache import TTLCache, run_cleanup_loop
from pokegateway.services.pokeapi import PokeApiClient
from pokegateway.services.pokemon import PokemonService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan events.

    Starts the periodic cache sweep and closes the upstream HTTP client on
    shutdown.

    Args:
        app: The FastAPI application instance

    Yields:
        None: Control back to the application
    """
    settings: Settings = app.state.settings

    configure_logging(settings)
    startup_logger = get_logger(__name__)

    cleanup_task: asyncio.Task[None] | None = None
    if settings.cache_cleanup_interval_seconds > 0:
        cleanup_task = asyncio.create_task(
            run_cleanup_loop(app.state.cache, settings.cache_cleanup_interval_seconds)
        )

    startup_logger.info(
        "Application starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.app_env.value,
        cache_ttl_seconds=settings.cache_ttl_seconds,
        pokeapi_base_url=settings.pokeapi_base_url,
    )

    yield

    if cleanup_task is not None:
        cleanup_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await cleanup_task

    await app.state.pokeapi_client.close()
    app.state.cache.clear()

    startup_logger.info("Application shutting down", app_name=settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings override for testing

    Returns:
        FastAPI: Configured application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Authenticated, cached façade over PokeAPI. Log in at /auth/login "
            "and browse /pokemons with the returned bearer token."
        ),
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    configure_state(app, settings)
    configure_middleware(app, settings)
    configure_exception_handlers(app)
    configure_routes(app)

    return app


def configure_state(app: FastAPI, settings: Settings) -> None:
    """Build the long-lived components and attach them to ``app.state``.

    Args:
        app: The FastAPI application instance
        settings: Application settings
    """
    cache = TTLCache()
    client = PokeApiClient(settings)

    app.state.settings = settings
    app.state.cache = cache
    app.state.pokeapi_client = client
    app.state.pokemon_service = PokemonService(
        cache,
        client,
        ttl_seconds=settings.cache_ttl_seconds,
        search_superset_size=settings.search_superset_size,
    )
    app.state.auth_service = AuthService(settings)


def configure_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure application middleware.

    Args:
        app: The FastAPI application instance
        settings: Application settings
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [settings.frontend_url],
        allow_credentials=not settings.is_development,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next: Any) -> Any:
        """Log requests and responses with correlation ID."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        set_correlation_id(request_id)

        request_logger = get_logger("pokegateway.request")
        start_time = time.perf_counter()

        request_logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            query=str(request.query_params) if request.query_params else None,
        )

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            request_logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            request_logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
                error=str(exc),
            )
            raise

        finally:
            clear_correlation_id()


def configure_exception_handlers(app: FastAPI) -> None:
    """Configure global exception handlers.

    Args:
        app: The FastAPI application instance
    """
    exception_logger = get_logger("pokegateway.exceptions")

    @app.exception_handler(PokeGatewayError)
    async def pokegateway_exception_handler(
        request: Request, exc: PokeGatewayError
    ) -> JSONResponse:
        """Handle application exceptions with structured error response."""
        request_id = getattr(request.state, "request_id", None)

        log = exception_logger.error if exc.status_code >= 500 else exception_logger.warning
        log(
            "Application error" if exc.status_code >= 500 else "Client error",
            error_code=exc.code,
            error_message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(request_id=request_id),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions with a consistent error response."""
        request_id = getattr(request.state, "request_id", None)

        exception_logger.exception(
            "Unhandled exception",
            error_type=type(exc).__name__,
            error_message=str(exc),
            path=request.url.path,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An unexpected error occurred",
                    "request_id": request_id,
                }
            },
        )


def configure_routes(app: FastAPI) -> None:
    """Configure application routes.

    Args:
        app: The FastAPI application instance
    """

    @app.get(
        "/health",
        tags=["Health"],
        response_model=HealthResponse,
        summary="Liveness probe",
        description="Returns OK if the service is running",
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get(
        "/",
        tags=["Root"],
        response_model=ServiceInfoResponse,
        summary="API root",
        description="Returns API information",
    )
    async def root(
        settings: Annotated[Settings, Depends(get_settings_from_request)],
    ) -> ServiceInfoResponse:
        """API root endpoint with service information."""
        return ServiceInfoResponse(
            service=settings.app_name,
            version=settings.app_version,
            docs="/docs",
            health="/health",
        )

    from pokegateway.api.router import router as api_router

    app.include_router(api_router)


# Create the application instance
app = create_app()


def cli() -> None:
    """CLI entry point for running the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pokegateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    cli()
