"""Request context middleware using ContextVar.

Assigns every request an id (from the X-Request-ID header, or a fresh
one), stores it in a ContextVar so log records anywhere downstream carry
it, logs one access line per request, and turns any exception that escapes
the routes into a generic 500. Internal details never reach the client.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from core.observability.otel_setup import create_request_span

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
INTERNAL_ERROR_BODY = {"error": "Internal server error"}

# ---------------------------------------------------------------------------
# Context variable: thread/task-safe request state
# ---------------------------------------------------------------------------

_current_request_id: ContextVar[str] = ContextVar("current_request_id", default="-")


def get_current_request_id() -> str:
    """Return the id of the request being handled, or "-" outside one.

    Safe to call from any code within the request lifecycle::

        logger.info("stored %s", book.id)  # record carries request_id
    """
    return _current_request_id.get()


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request id, access log, optional tracing span and 500 catch-all."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = _current_request_id.set(request_id)

        tracer = getattr(request.app.state, "tracer", None)
        span = create_request_span(tracer, request.method, request.url.path, request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Unhandled exception on %s %s", request.method, request.url.path,
                )
                response = JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

            response.headers[REQUEST_ID_HEADER] = request_id
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.info(
                "%s %s -> %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            if span is not None:
                span.set_attribute("http.status_code", response.status_code)
            return response
        finally:
            if span is not None:
                span.end()
            _current_request_id.reset(token)
