"""
FastAPI middleware for observability.

Correlation ID binding and one access log line per request.

Dependencies: fastapi, starlette, coursehub.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from coursehub.observability.correlation import correlation_scope

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Probed by load balancers every few seconds.
QUIET_PATH_SUFFIXES = ("/health", "/health/db")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log each request once it has been answered.

    Server errors log at ERROR, client errors at WARNING, health probes at
    DEBUG and everything else at INFO.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        context = {
            "method": method,
            "path": path,
            "client_host": request.client.host if request.client else None,
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} failed",
                extra={**context, "process_time_ms": _elapsed_ms(start), "error_type": type(e).__name__},
            )
            raise

        status_code = response.status_code
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        elif path.endswith(QUIET_PATH_SUFFIXES):
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{method} {path} - {status_code}",
            extra={**context, "status_code": status_code, "process_time_ms": _elapsed_ms(start)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind the caller's X-Correlation-ID (or a fresh one) and echo it in the response."""

    async def dispatch(self, request: Request, call_next):
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
