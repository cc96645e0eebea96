"""HTTP transport for the REST backend."""

from .http import AsyncHTTPTransport

__all__ = ["AsyncHTTPTransport"]
