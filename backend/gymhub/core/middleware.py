"""
GymHub - HTTP Middleware
Request logging and timing, security headers, body size limit
"""

import time
from typing import Callable, FrozenSet
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from gymhub.core.logging_config import (
    logger,
    set_request_id,
    set_user_id,
    generate_request_id,
)


# Probes and docs are not worth a log line each
QUIET_PATHS: FrozenSet[str] = frozenset({
    "/",
    "/health",
    "/favicon.ico",
    "/docs",
    "/redoc",
    "/openapi.json",
})

SLOW_REQUEST_MS = 1000

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (the caller's X-Request-ID when given),
    times it, and logs the outcome. The id and the duration are echoed back
    as X-Request-ID and X-Response-Time.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        set_request_id(request_id)
        set_user_id("")

        path = request.url.path
        started = time.perf_counter()

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - started) * 1000
                logger.log_error_with_context(exc, context=f"{request.method} {path}", duration_ms=duration_ms)
                raise

            duration_ms = (time.perf_counter() - started) * 1000
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            if path not in QUIET_PATHS:
                client_ip = request.client.host if request.client else "unknown"
                logger.log_request(request.method, path, response.status_code, duration_ms, client_ip=client_ip)
                if duration_ms > SLOW_REQUEST_MS:
                    logger.warning(f"Slow request: {request.method} {path} took {duration_ms:.0f}ms")

            return response
        finally:
            set_request_id("")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose declared body is larger than max_size with 413"""

    def __init__(self, app: ASGIApp, max_size: int = 1024 * 1024):
        super().__init__(app)
        self.max_size = max_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        content_length = request.headers.get("content-length", "")

        if content_length.isdigit() and int(content_length) > self.max_size:
            logger.warning(
                f"Rejected {request.method} {request.url.path}: body of {content_length} bytes "
                f"exceeds {self.max_size}"
            )
            return JSONResponse(
                status_code=413,
                content={"message": f"Request body too large. Maximum size is {self.max_size} bytes"}
            )

        return await call_next(request)


__all__ = [
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "RequestSizeLimitMiddleware",
    "QUIET_PATHS",
]
