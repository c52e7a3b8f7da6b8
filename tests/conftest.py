from collections import deque
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from common.models import CommandResult
from vehicle_daemon.main import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    Synchronous TestClient fixture for FastAPI.
    Use this for standard API endpoint testing.
    """
    with TestClient(app=app, base_url="http://test") as c:
        yield c


@pytest.fixture
def mock_vehicle_api(mocker):
    """
    Replaces the shared vehicle API client used by the routers.

    send_and_refresh succeeds by default; tests override ``return_value`` or
    ``side_effect`` to simulate a vehicle refusing a command.
    """
    api = MagicMock()
    api.send_and_refresh.return_value = CommandResult(success=True, message="")
    api.fetch_vehicles.return_value = []
    mocker.patch("vehicle_daemon.api_routers.charge.get_vehicle_api_client", return_value=api)
    mocker.patch("vehicle_daemon.api_routers.vehicles.get_vehicle_api_client", return_value=api)
    return api


# --- Global state reset fixtures for test isolation ---


@pytest.fixture(autouse=True)
def reset_app_state_globals():
    """
    Automatically reset the mutable state in app_state before each test.
    The option catalog loaded at startup is kept.
    """
    import vehicle_daemon.app_state as app_state

    app_state.vehicles = {}
    app_state.vehicle_options = {}
    app_state.unknown_codes = {}
    app_state.command_log = deque(maxlen=app_state.MAX_COMMAND_LOG_LENGTH)


@pytest.fixture(autouse=True)
def reset_vehicle_api_client():
    """Drop any shared vehicle API client and cached config created by a test."""
    import vehicle_daemon.config as config
    import vehicle_daemon.vehicle_api as vehicle_api

    yield
    vehicle_api.close_vehicle_api_client()
    config.ACTUAL_CATALOG_PATH = None
