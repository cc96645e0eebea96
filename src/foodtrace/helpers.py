"""Notification and deletion helpers shared by the pages."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable

import structlog

from .core.exceptions import ApiError, FoodTraceError
from .toast import ToastMessage, ToastRef
from .transport.http import AsyncHTTPTransport

logger = structlog.get_logger()

DEFAULT_ERROR_MESSAGE = "An error occurred"
DEFAULT_SUCCESS_MESSAGE = "Operation successful"


def notify(toast_ref: ToastRef | None, success: bool, message: str) -> None:
    """Show a success or error toast.

    Does nothing while ``toast_ref`` has no display attached. A failing display
    is logged, never raised to the caller.
    """
    toast = toast_ref.current if toast_ref is not None else None
    if toast is None:
        logger.debug("toast_skipped_no_display", success=success, detail=message)
        return
    toast_message = ToastMessage(
        severity="success" if success else "error",
        summary="Success" if success else "Error",
        detail=message,
    )
    try:
        toast.show(toast_message)
    except Exception as e:
        logger.warning("toast_display_failed", detail=message, error=str(e))


def error_message(exc: FoodTraceError) -> str:
    """Text shown to the user for a failed request."""
    if isinstance(exc, ApiError):
        return exc.server_message or DEFAULT_ERROR_MESSAGE
    return exc.message or DEFAULT_ERROR_MESSAGE


async def delete_record(
    *,
    id: int | str,
    endpoint: str,
    name: str,
    toast_ref: ToastRef | None,
    token: str,
    refetch: Callable[[], Awaitable[object] | object],
    transport: AsyncHTTPTransport,
) -> None:
    """DELETE ``endpoint/id`` and report the outcome.

    On success a "<name> deleted successfully" toast is shown and ``refetch`` is
    called once. On failure only an error toast is shown.
    """
    path = f"{endpoint}/{id}"
    try:
        await transport.request("DELETE", path, token=token)
    except FoodTraceError as e:
        logger.warning("delete_failed", path=path, status_code=e.status_code, error=e.message)
        notify(toast_ref, False, error_message(e))
        return
    except Exception as e:
        logger.warning("delete_failed", path=path, error=str(e))
        notify(toast_ref, False, str(e) or DEFAULT_ERROR_MESSAGE)
        return

    logger.info("delete_succeeded", path=path)
    notify(toast_ref, True, f"{name} deleted successfully")
    result = refetch()
    if inspect.isawaitable(result):
        await result
