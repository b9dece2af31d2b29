"""
Middleware for injecting contextual fields into structured logs.

This middleware adds request-specific information to the log context
that will be included in all log messages during request processing,
and writes one access-log line per request.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.logging import clear_log_context, logger, set_log_context
from catalog.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint and method to log context
    - Adds status_code and duration_ms once the response is ready
    - Logs "<METHOD> <path> <status> <duration>ms" for paths not in
      LOG_EXCLUDED_PATHS
    - Clears log context after request completes
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and inject logging context.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            Response from the endpoint.
        """
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
        )
        start_time = time.perf_counter()

        try:
            response = await call_next(request)

            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            set_log_context(
                status_code=response.status_code, duration_ms=duration_ms
            )
            if request.url.path not in app_settings.LOG_EXCLUDED_PATHS:
                logger.info(
                    f"{request.method} {request.url.path} "
                    f"{response.status_code} {duration_ms}ms"
                )
            return response
        finally:
            clear_log_context()
