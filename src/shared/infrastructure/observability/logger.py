"""
Structured Logging Configuration
structlog setup with request-scoped context and credential scrubbing
"""
from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping

import structlog

# Event keys whose values must never reach a log sink.
SENSITIVE_KEYS = frozenset(
    {
        "password",
        "new_password",
        "newPassword",
        "answer",
        "token",
        "authorization",
        "secret",
    }
)

_REDACTED = "***"


def scrub_credentials(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Structlog processor replacing credential values with a placeholder."""
    for key in list(event_dict.keys()):
        if key in SENSITIVE_KEYS and event_dict[key] is not None:
            event_dict[key] = _REDACTED
    return event_dict


def configure_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structured logging for the application.

    Processors add the request context bound by the HTTP middleware
    (request_id, path, method, user_id), logger name, level and an ISO
    timestamp, then scrub credential fields before rendering.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON output when True, coloured console output otherwise
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        scrub_credentials,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("User logged in", user_id=str(user.id))
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Replace the request-scoped logging context.

    Called once per request by the request-context middleware; values are
    merged into every event emitted until clear_context().
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
