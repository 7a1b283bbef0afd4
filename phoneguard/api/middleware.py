"""Request context middleware and JSON error handlers.

Every request gets a correlation id bound to the structlog context. Content
routes also report where their payload came from: the CMS, or one of the mock
fallbacks (`mock_unconfigured`, `mock_error`). Fallbacks are silent to API
consumers by design of the content layer, so this is where they show up.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING, Any

import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from phoneguard.content.fetcher import collect_sources

if TYPE_CHECKING:
    from fastapi import FastAPI, Request, Response

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"
SOURCE_HEADER = "X-Content-Source"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the correlation id and reports the content sources of a request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:12]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
        sources = collect_sources()

        start = time.monotonic()
        response = await call_next(request)
        served_from = sorted(set(sources))

        log = logger.bind(
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        if any(source != "cms" for source in served_from):
            log.warning("request_served_mock_content", content_sources=served_from)
        else:
            log.info("request_completed", content_sources=served_from or None)

        response.headers[CORRELATION_HEADER] = correlation_id
        if served_from:
            response.headers[SOURCE_HEADER] = ",".join(served_from)
        return response


def _error_body(error: str, detail: Any) -> dict[str, Any]:
    correlation_id = structlog.contextvars.get_contextvars().get("correlation_id")
    return {"error": error, "detail": detail, "correlation_id": correlation_id}


def add_exception_handlers(app: FastAPI) -> None:
    """Register handlers that turn exceptions into JSON error bodies.

    Content fetches never raise, so these only see bad request parameters
    (malformed JSON filters) and genuine bugs.
    """

    @app.exception_handler(ValueError)
    async def bad_parameter_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.info("request_rejected", path=request.url.path, reason=str(exc))
        return JSONResponse(status_code=400, content=_error_body("bad_request", str(exc)))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", "An unexpected error occurred"),
        )
