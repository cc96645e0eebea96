"""Exception hierarchy for the food trace admin front-end."""

from __future__ import annotations

from typing import Any


class FoodTraceError(Exception):
    """Base exception for all food trace errors.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code (if from HTTP response).
        response_body: Decoded server response (if available).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, status_code={self.status_code})"
        )


class ConfigurationError(FoodTraceError):
    """Application configuration is invalid or missing required values."""

    pass


# --- HTTP errors ---


class ApiError(FoodTraceError):
    """The backend answered with a non-2xx status.

    ``server_message`` is the ``message`` field of the JSON body, or ``None``
    when the body carried none.
    """

    def __init__(
        self,
        message: str,
        *,
        server_message: str | None = None,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.server_message = server_message


class AuthenticationError(ApiError):
    """Raised when the access token is missing or rejected (401)."""

    pass


class AuthorizationError(ApiError):
    """Raised when the token lacks permission (403)."""

    pass


class NotFoundError(ApiError):
    """Raised when a resource is not found (404)."""

    pass


class ValidationError(ApiError):
    """Raised when the backend rejects the payload (422)."""

    pass


class ServerError(ApiError):
    """Raised when the server returns 5xx error."""

    pass


# --- Transport errors ---


class NetworkError(FoodTraceError):
    """The request never reached the server or the connection dropped."""

    pass


class RequestTimeoutError(NetworkError):
    """Raised when a request times out.

    Only possible when API__TIMEOUT is configured.
    """

    pass


class MalformedResponseError(FoodTraceError):
    """The server answered 2xx but the body is not valid JSON."""

    pass


__all__ = [
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "FoodTraceError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RequestTimeoutError",
    "ServerError",
    "ValidationError",
]
