"""HTTP transport layer using httpx."""

from __future__ import annotations

import contextlib
import time
from typing import Any

import httpx
import structlog

from .._version import __version__
from ..core.config import ApiSettings
from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    ValidationError,
)

logger = structlog.get_logger()

_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    422: ValidationError,
}


def _raise_for_status(response: httpx.Response) -> None:
    """Map a non-2xx response to an ApiError carrying the server's ``message``."""
    if response.is_success:
        return
    body: Any = None
    with contextlib.suppress(ValueError):
        body = response.json()
    server_message: str | None = None
    if isinstance(body, dict) and body.get("message"):
        server_message = str(body["message"])
    msg = server_message or f"HTTP {response.status_code}"
    if response.status_code >= 500:
        error_cls: type[ApiError] = ServerError
    else:
        error_cls = _STATUS_ERRORS.get(response.status_code, ApiError)
    raise error_cls(
        msg,
        server_message=server_message,
        status_code=response.status_code,
        response_body=body,
    )


def _decode(response: httpx.Response) -> Any:
    """Decode a 2xx body as JSON. ``204 No Content`` decodes to an empty dict."""
    if response.status_code == 204:
        return {}
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(
            f"Invalid JSON in response: {e}",
            status_code=response.status_code,
        ) from e


class AsyncHTTPTransport:
    """Asynchronous HTTP transport for the inventory REST backend.

    One ``httpx.AsyncClient`` is created lazily and reused. The access token is
    passed per request so the transport itself holds no session state.
    """

    def __init__(
        self,
        settings: ApiSettings,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def _build_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"foodtrace-admin/{__version__}",
        }

    @staticmethod
    def _request_headers(method: str, token: str | None) -> dict[str, str]:
        headers: dict[str, str] = {}
        if method in ("POST", "PUT"):
            headers["Content-Type"] = "application/json"
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._settings.base_url,
                timeout=self._settings.timeout,
                verify=self._settings.verify_ssl,
                headers=self._build_headers(),
                transport=self._http_transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        """Execute one HTTP request and return the decoded JSON body.

        Raises:
            ApiError: non-2xx status (subclass chosen by status code).
            NetworkError: the request did not complete.
            MalformedResponseError: 2xx with a body that is not JSON.
        """
        method = method.upper()
        start = time.perf_counter()
        try:
            response = await self.client.request(
                method=method,
                url=path,
                json=json,
                params=params,
                headers=self._request_headers(method, token),
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"Request timed out after {self._settings.timeout}s: {e}"
            ) from e
        except httpx.ConnectError as e:
            raise NetworkError(f"Failed to connect to {self._settings.base_url}: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or type(e).__name__) from e
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "http_request",
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_ms=round(elapsed_ms, 1),
        )
        _raise_for_status(response)
        return _decode(response)

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
