"""Logging middleware for correlation ID propagation.

- Extracts correlation ID from incoming X-Correlation-ID header
- Generates a new correlation ID if not present
- Sets correlation ID in context for downstream use
- Includes correlation ID in response headers
- Logs request start/end with timing

Usage:
    from fastapi import FastAPI
    from exemption_bridge.api.middleware.logging_middleware import LoggingMiddleware

    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from exemption_bridge.bootstrap.correlation import (
    generate_correlation_id,
    set_correlation_id,
)

# Header name for correlation ID
CORRELATION_HEADER = "X-Correlation-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID propagation and request logging."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request with correlation ID and logging.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware or route handler.

        Returns:
            HTTP response with correlation ID header added.
        """
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        set_correlation_id(correlation_id)

        log = structlog.get_logger().bind(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )
        log.info("request_started")
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log.exception(
                "request_failed",
                duration_ms=round(duration_ms, 2),
                error_type=type(exc).__name__,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
