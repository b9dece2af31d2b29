"""
Prometheus metrics middleware for HTTP requests.

This middleware automatically tracks HTTP request metrics including
request counts, duration, and in-progress requests.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog.utils.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)


def _endpoint_label(request: Request) -> str:
    """
    Route template for the request, e.g. "/books/{book_id}".

    The router stores the matched route in the scope. Requests that match
    no route are labelled with the raw path.
    """
    route = request.scope.get("route")
    path = getattr(route, "path_format", None) or getattr(route, "path", None)
    return path or request.url.path


class PrometheusMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to track Prometheus metrics for HTTP requests.

    Tracks the following metrics:
    - http_requests_total: Counter of total requests by method, endpoint, and status
    - http_request_duration_seconds: Histogram of request durations
    - http_requests_in_progress: Gauge of in-progress requests
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process the request and track metrics.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            HTTP response from the endpoint.
        """
        method = request.method
        in_progress = http_requests_in_progress.labels(
            method=method, endpoint=request.url.path
        )
        in_progress.inc()
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            endpoint = _endpoint_label(request)
            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(time.perf_counter() - start_time)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()
            in_progress.dec()
