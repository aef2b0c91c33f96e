"""
HTTP middleware: correlation id binding and access logging.

Dependencies: fastapi, starlette
System role: Request-scoped observability for the planner API
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from session_planner.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)
from session_planner.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One line when a request arrives and one when it finishes or fails."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        request_context = {"method": request.method, "path": request.url.path}

        logger.info(
            route,
            extra={
                **request_context,
                "query_string": request.url.query or None,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{route} - unhandled error",
                e,
                process_time_ms=_elapsed_ms(started),
                **request_context,
            )
            raise

        logger.info(
            f"{route} - {response.status_code}",
            extra={
                **request_context,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Bind the caller's ``X-Correlation-ID`` (or a generated one) for the request.

    The id is echoed on the response so clients can quote it when reporting
    a failed booking or suggestion call.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
