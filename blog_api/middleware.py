"""Application middleware."""
import secrets
import time

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .config import REQUEST_ID_HEADER

log = structlog.get_logger()


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Middleware to log every request with a request id."""

    async def dispatch(self, request: Request, call_next):
        # Reuse the caller's request id when one is sent
        request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(8)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        # Unhandled errors become a 500 in the outer error middleware
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            log.info(
                "request_handled",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
