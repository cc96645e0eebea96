"""Request logging middleware."""

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every page request with timing and tag its log events with a request id.

    The id comes from an incoming ``X-Request-ID`` header when present. It is
    bound to structlog's context variables for the duration of the request, so
    fetch, submit and delete events logged while serving a page carry it.
    Backend GETs scheduled during the request keep the id after it returns.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            logger.info(
                "request_started",
                client=request.client.host if request.client else None,
            )
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error("request_failed", error=str(e))
                raise
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "request_completed",
                status_code=response.status_code,
                elapsed_ms=round(elapsed_ms, 1),
            )
        finally:
            structlog.contextvars.clear_contextvars()
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"
        return response
