"""
eventrooms/api/middleware.py

Custom ASGI middleware.

RequestLoggingMiddleware
    Logs every HTTP request with method, path, status code, and wall-clock
    duration using structlog.  A request id (incoming ``X-Request-ID`` or a
    fresh UUID) is bound to the structlog context for the duration of the
    request and echoed back in the response headers.  Excluded from logging:
      - GET /health  (high-frequency liveness check)
      - GET /docs, /redoc, /openapi.json  (OpenAPI UI assets)
"""
from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

_SILENT_PATHS: frozenset[str] = frozenset(
    {"/health", "/docs", "/redoc", "/openapi.json"}
)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request's method, path, status code, and latency."""

    async def dispatch(self, request: Request, call_next: object) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.bind_contextvars(request_id=request_id)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)  # type: ignore[arg-type]
            duration_ms = (time.perf_counter() - start) * 1000

            if request.url.path not in _SILENT_PATHS:
                logger.info(
                    "http_request",
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 2),
                    client=request.client.host if request.client else None,
                )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
