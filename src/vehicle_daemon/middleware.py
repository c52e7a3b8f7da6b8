"""
Contains custom FastAPI middleware for the options2api application.

Requests are labelled by their route template (``/api/vehicles/{vehicle_id}``) rather
than the concrete path, so vehicle identifiers do not multiply metric series.
"""

import logging
import time

from fastapi import Request

from vehicle_daemon.metrics import HTTP_LATENCY, HTTP_REQUESTS

logger = logging.getLogger(__name__)


def _endpoint_label(request: Request) -> str:
    route = request.scope.get("route")
    path_format = getattr(route, "path_format", None)
    return path_format or request.url.path


async def prometheus_http_middleware(request: Request, call_next):
    """
    FastAPI middleware to record Prometheus metrics for HTTP requests.

    Measures the latency of each request and increments a counter labelled by
    method, endpoint and status code. An exception escaping the handler is counted
    as a 500 and re-raised.

    Args:
        request: The incoming FastAPI Request object.
        call_next: A function to call to process the request and get the response.

    Returns:
        The response object from the next handler in the chain.
    """
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        latency = time.perf_counter() - start
        endpoint = _endpoint_label(request)
        HTTP_REQUESTS.labels(method=request.method, endpoint=endpoint, status_code=500).inc()
        HTTP_LATENCY.labels(method=request.method, endpoint=endpoint).observe(latency)
        logger.error(f"Unhandled error serving {request.method} {request.url.path}")
        raise
    latency = time.perf_counter() - start

    endpoint = _endpoint_label(request)
    HTTP_REQUESTS.labels(
        method=request.method, endpoint=endpoint, status_code=response.status_code
    ).inc()
    HTTP_LATENCY.labels(method=request.method, endpoint=endpoint).observe(latency)
    return response
