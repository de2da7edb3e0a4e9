"""
Structured logging for the Metaverse Realty API

Request-scoped values (``request_id``, ``user_id``) are bound through
structlog's contextvars support and merged into every event logged while the
request is handled.
"""

import logging
import secrets
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.types import EventDict, Processor

SERVICE_NAME = "metaverse-realty"


def add_service_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    _ = logger, method_name
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"`` or ``"warning"``
        json_output: Render one JSON object per line instead of console output
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    processors: list[Processor] = [
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_service_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """16 hex characters, enough to tell concurrent requests apart in the logs."""
    return secrets.token_hex(8)


def bind_request_context(request_id: str | None = None) -> str:
    """Start a fresh logging context for a request and return its id."""
    clear_contextvars()
    request_id = request_id or new_request_id()
    bind_contextvars(request_id=request_id)
    return request_id


def bind_user(user_id: str | None) -> None:
    """Attach the authenticated user (or none) to the current request context."""
    bind_contextvars(user_id=user_id)


def clear_request_context() -> None:
    clear_contextvars()
