"""POST/PUT hook with bearer auth, loading state and toast feedback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import structlog

from ..context import LayoutContext
from ..core.exceptions import FoodTraceError
from ..helpers import DEFAULT_ERROR_MESSAGE, DEFAULT_SUCCESS_MESSAGE, error_message, notify
from ..toast import ToastRef
from ..transport.http import AsyncHTTPTransport

logger = structlog.get_logger()

HttpMethod = Literal["POST", "PUT"]


@dataclass(frozen=True)
class SubmitOptions:
    method: HttpMethod
    body: Any


class SubmitHook:
    """Sends form data and reports the outcome through a toast.

    ``submit_request`` returns the decoded body on success and ``None`` on any
    failure. A ``None`` result has already been shown to the user, so callers
    only need to act on success.
    """

    def __init__(self, context: LayoutContext, transport: AsyncHTTPTransport) -> None:
        self._context = context
        self._transport = transport
        self.loading = False

    async def submit_request(
        self,
        endpoint: str,
        options: SubmitOptions,
        toast_ref: ToastRef | None,
    ) -> Any:
        if options.method not in ("POST", "PUT"):
            raise ValueError(f"unsupported submit method: {options.method}")
        self.loading = True
        try:
            response_data = await self._transport.request(
                options.method,
                endpoint,
                json=options.body,
                token=self._context.access_token,
            )
        except FoodTraceError as e:
            logger.warning(
                "submit_failed",
                endpoint=endpoint,
                method=options.method,
                status_code=e.status_code,
                error=e.message,
            )
            notify(toast_ref, False, error_message(e))
            return None
        except Exception as e:
            logger.warning(
                "submit_failed", endpoint=endpoint, method=options.method, error=str(e)
            )
            notify(toast_ref, False, str(e) or DEFAULT_ERROR_MESSAGE)
            return None
        finally:
            self.loading = False

        if response_data is None:
            # None is reserved for failures, so a null body is one too.
            logger.warning("submit_empty_response", endpoint=endpoint, method=options.method)
            notify(toast_ref, False, DEFAULT_ERROR_MESSAGE)
            return None

        message = None
        if isinstance(response_data, dict):
            message = response_data.get("message")
        logger.info("submit_succeeded", endpoint=endpoint, method=options.method)
        notify(toast_ref, True, message or DEFAULT_SUCCESS_MESSAGE)
        return response_data
