"""Structlog setup for the admin front-end.

Every event passes through ``mask_secrets``, which redacts token-like fields
at the top level and inside dict values such as request headers.
"""
import logging
from typing import Any

import structlog

SECRET_KEYS = frozenset({"token", "access_token", "authorization"})


def redact(value: str, visible_chars: int = 4) -> str:
    """Redact a secret, showing only the last N characters."""
    if len(value) <= visible_chars:
        return "***"
    return f"***{value[-visible_chars:]}"


def _mask(value: Any) -> Any:
    if isinstance(value, str):
        if value.lower().startswith("bearer "):
            return f"Bearer {redact(value[7:])}"
        return redact(value)
    if isinstance(value, dict):
        return {k: _mask(v) if k.lower() in SECRET_KEYS else v for k, v in value.items()}
    return "***"


def mask_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Structlog processor for token-like keys."""
    for key, value in event_dict.items():
        if key.lower() in SECRET_KEYS and not str(value).startswith("***"):
            event_dict[key] = _mask(value)
        elif isinstance(value, dict):
            event_dict[key] = _mask(value)
    return event_dict


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Configure structured logging.

    ``request_id`` bound by the request middleware is merged into every event
    logged while that request is handled, including hook and helper events.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        mask_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        processors.extend(
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a configured structlog logger."""
    return structlog.get_logger(name)
