"""
HTTP middleware for request logging and correlation IDs.

Health checks are logged at DEBUG so load balancer polling does not drown
the chat and upload traffic.

Dependencies: starlette, backend.observability.correlation, backend.observability.log_utils
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import clear_correlation_id, set_correlation_id
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_PREFIXES = ("/health",)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and latency."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path.startswith(QUIET_PATH_PREFIXES) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                f"{method} {path} - unhandled {type(e).__name__}",
                exc_info=True,
                method=method,
                path=path,
                duration_ms=_elapsed_ms(start),
            )
            raise

        log_with_context(
            logger,
            logging.WARNING if response.status_code >= 500 else level,
            f"{method} {path} - {response.status_code} in {_elapsed_ms(start)}ms",
            method=method,
            path=path,
            status_code=response.status_code,
            client_host=request.client.host if request.client else None,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds the X-Correlation-ID header (or a new UUID) to the request context."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
