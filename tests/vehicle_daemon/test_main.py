"""
Tests for the FastAPI application setup in `vehicle_daemon.main`.

This module includes tests for:
- The `main()` function and its call to `uvicorn.run`.
- Router registration and URL prefixes of the application built by `create_app()`.
- The plain-text handler for response validation errors.
- Closing the vehicle API client on shutdown.
"""

import os
from unittest.mock import patch

from fastapi.exceptions import ResponseValidationError
from fastapi.testclient import TestClient

from vehicle_daemon import main as main_module


@patch.dict(
    os.environ,
    {
        "OPTIONS2API_HOST": "127.0.0.1",
        "OPTIONS2API_PORT": "9000",
        "OPTIONS2API_LOG_LEVEL": "DEBUG",
    },
)
@patch("vehicle_daemon.main.uvicorn.run")
def test_main_function_calls_uvicorn(mock_uvicorn_run):
    """main() passes host, port and a lowercased log level from the environment to uvicorn."""
    main_module.main()
    mock_uvicorn_run.assert_called_once_with(
        main_module.app, host="127.0.0.1", port=9000, log_level="debug"
    )


@patch("vehicle_daemon.main.uvicorn.run")
def test_main_function_defaults(mock_uvicorn_run, monkeypatch):
    for name in ("OPTIONS2API_HOST", "OPTIONS2API_PORT", "OPTIONS2API_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    main_module.main()
    mock_uvicorn_run.assert_called_once_with(
        main_module.app, host="0.0.0.0", port=8000, log_level="info"
    )


def test_routes_are_registered():
    paths = set(main_module.app.openapi()["paths"])
    assert "/healthz" in paths
    assert "/readyz" in paths
    assert "/metrics" in paths
    assert "/api/options/decode" in paths
    assert "/api/vehicles/{vehicle_id}" in paths
    assert "/api/vehicles/{vehicle_id}/charge/limit" in paths
    assert "/api/commands" in paths
    assert "/options/decode" not in paths


def test_create_app_uses_fastapi_config(monkeypatch):
    monkeypatch.setenv("OPTIONS2API_TITLE", "Garage API")
    app = main_module.create_app()
    assert app.title == "Garage API"


def test_response_validation_error_handler():
    app = main_module.create_app()

    @app.get("/broken", response_model=int)
    async def broken():
        return "not an int"

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/broken")
    assert response.status_code == 500
    assert response.text.startswith("Validation error:")
    assert ResponseValidationError in app.exception_handlers


def test_shutdown_closes_vehicle_api_client():
    app = main_module.create_app()
    with patch("vehicle_daemon.main.close_vehicle_api_client") as mock_close:
        with TestClient(app):
            mock_close.assert_not_called()
        mock_close.assert_called_once()
