"""Utilities: logging."""

from .logging_config import configure_logging, get_logger, mask_secrets, redact

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_secrets",
    "redact",
]
