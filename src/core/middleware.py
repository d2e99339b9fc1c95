"""
Request tracing middleware.

Each request is tagged with an id (the inbound X-Request-ID header, or a
fresh 8-character one). The id, method and path are bound to the log
context for the lifetime of the request and the id is echoed back on the
response.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from core.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Binds request context for logging and logs one line per request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        bind_context(request_id=request_id, method=request.method, path=request.url.path)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            logger.info("Request completed", status_code=response.status_code, duration_ms=_elapsed_ms(started))
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception as e:
            logger.error(
                "Request failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=_elapsed_ms(started),
            )
            raise
        finally:
            clear_context()
