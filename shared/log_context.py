"""
Request logging middleware and context management.

Provides:
- Request ID generation for correlation (echoed as X-Request-ID)
- Request/response logging with timing
- Request-scoped context bound into structlog contextvars, so every log
  line emitted while handling the request carries request_id/method/path
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request, Response

from shared.generators import generate_request_id
from shared.logging import get_logger

log = get_logger("churchinkomoka.request")


def log_request_end(
    request: Request, status_code: int, duration_ms: int
) -> None:
    """Log the end of a request with timing and status."""
    if status_code >= 500:
        log_fn = log.error
    elif status_code >= 400:
        log_fn = log.warning
    else:
        log_fn = log.info

    log_fn(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def setup_logging_middleware(app: FastAPI) -> None:
    """Register the request logging middleware with the FastAPI app."""

    @app.middleware("http")
    async def request_logging(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        request_id = generate_request_id()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            user_agent=request.headers.get("User-Agent", "")[:100],
        )

        # Unhandled exceptions propagate past here to the app's 500 handler
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - start) * 1000)

        log_request_end(request, response.status_code, duration_ms)
        response.headers["X-Request-ID"] = request_id
        structlog.contextvars.clear_contextvars()
        return response
