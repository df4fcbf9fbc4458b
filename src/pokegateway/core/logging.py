"""Structured logging built on structlog and the standard logging module.

JSON lines are emitted in production (or when ``LOG_FORMAT=json``); a
coloured console renderer is used everywhere else. Every entry carries the
request correlation ID bound by the HTTP middleware.

Usage:
    from pokegateway.core.logging import configure_logging, get_logger

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info("pokemon_list_cache_hit", cache_key="list:0:20")
"""

import logging
import sys
from contextvars import ContextVar

import structlog
from structlog.types import EventDict, Processor

from pokegateway.config import Settings

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def get_correlation_id() -> str | None:
    """Return the request ID bound to the current context, if any."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    _correlation_id.set(None)


def add_request_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Structlog processor stamping service name and correlation ID."""
    event_dict["service"] = "pokegateway"
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the root logger.

    Args:
        settings: Application settings. If None, the cached settings are used.
    """
    if settings is None:
        from pokegateway.config import get_settings

        settings = get_settings()

    level = getattr(logging, settings.log_level.value, logging.INFO)
    pre_chain = _pre_chain()
    renderer = _renderer(settings.use_json_logs)

    processors = [*pre_chain]
    if settings.use_json_logs:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=pre_chain,
        )
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)
