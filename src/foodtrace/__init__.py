"""Food trace admin: REST-backed CRUD pages for food ingredient inventory."""

from ._version import __version__
from .context import LayoutConfig, LayoutContext, LayoutState
from .core.config import Settings, get_settings
from .core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    FoodTraceError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    ValidationError,
)
from .helpers import delete_record, notify
from .hooks import FetchHook, SubmitHook, SubmitOptions
from .models import EMPTY_RECORD, InventoryRecord
from .toast import ToastBuffer, ToastMessage, ToastRef
from .transport import AsyncHTTPTransport
from .utils.logging_config import configure_logging

__all__ = [
    "EMPTY_RECORD",
    "ApiError",
    "AsyncHTTPTransport",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "FetchHook",
    "FoodTraceError",
    "InventoryRecord",
    "LayoutConfig",
    "LayoutContext",
    "LayoutState",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RequestTimeoutError",
    "ServerError",
    "Settings",
    "SubmitHook",
    "SubmitOptions",
    "ToastBuffer",
    "ToastMessage",
    "ToastRef",
    "ValidationError",
    "__version__",
    "configure_logging",
    "delete_record",
    "get_settings",
    "notify",
]
