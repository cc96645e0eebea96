"""Core configuration and errors for the food trace admin."""

from .config import ApiSettings, AuthSettings, Settings, get_settings
from .exceptions import (
    ApiError,
    ConfigurationError,
    FoodTraceError,
    MalformedResponseError,
    NetworkError,
)

__all__ = [
    "ApiError",
    "ApiSettings",
    "AuthSettings",
    "ConfigurationError",
    "FoodTraceError",
    "MalformedResponseError",
    "NetworkError",
    "Settings",
    "get_settings",
]
