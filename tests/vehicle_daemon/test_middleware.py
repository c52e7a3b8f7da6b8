"""
Tests for the Prometheus HTTP metrics middleware.

This module verifies that `prometheus_http_middleware`:
- Counts requests by method, endpoint and status code.
- Records request latency by method and endpoint.
- Labels requests with the route template rather than the concrete path.
- Counts an exception escaping the handler as a 500.
"""

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from vehicle_daemon.metrics import HTTP_LATENCY, HTTP_REQUESTS
from vehicle_daemon.middleware import prometheus_http_middleware


@pytest.fixture(autouse=True)
def reset_metrics():
    """Clear the labelled HTTP metrics before each test."""
    HTTP_REQUESTS.clear()
    HTTP_LATENCY.clear()


def get_histogram_count(histogram, **labels):
    for metric in histogram.collect():
        for sample in metric.samples:
            if sample.name.endswith("_count") and all(
                sample.labels.get(k) == v for k, v in labels.items()
            ):
                return sample.value
    return 0


def request_count(**labels):
    return HTTP_REQUESTS.labels(**labels)._value.get()


@pytest.fixture
def test_app():
    app = FastAPI()

    @app.middleware("http")
    async def middleware_wrapper(request: Request, call_next):
        return await prometheus_http_middleware(request, call_next)

    @app.get("/ping")
    async def ping():
        return PlainTextResponse("pong")

    @app.get("/items/{item_id}")
    async def get_item(item_id: str):
        return {"item_id": item_id}

    @app.post("/fail")
    async def fail():
        raise RuntimeError("boom")

    return app


def test_records_count_and_latency(test_app):
    client = TestClient(test_app)
    response = client.get("/ping")
    assert response.status_code == 200
    assert request_count(method="GET", endpoint="/ping", status_code="200") == 1
    assert get_histogram_count(HTTP_LATENCY, method="GET", endpoint="/ping") == 1


def test_labels_by_route_template(test_app):
    client = TestClient(test_app)
    client.get("/items/1")
    client.get("/items/2")
    assert request_count(method="GET", endpoint="/items/{item_id}", status_code="200") == 2


def test_unmatched_path_uses_url(test_app):
    client = TestClient(test_app)
    response = client.get("/missing")
    assert response.status_code == 404
    assert request_count(method="GET", endpoint="/missing", status_code="404") == 1


def test_exception_counted_as_500(test_app):
    client = TestClient(test_app, raise_server_exceptions=False)
    response = client.post("/fail")
    assert response.status_code == 500
    assert request_count(method="POST", endpoint="/fail", status_code="500") == 1
    assert get_histogram_count(HTTP_LATENCY, method="POST", endpoint="/fail") == 1
