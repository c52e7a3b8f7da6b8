"""
Tests for the vehicles API router.

Covers registering vehicles, reading their decoded configuration and report, and
refreshing the vehicle list from the (mocked) vehicle API.
"""

import httpx
import pytest

import vehicle_daemon.vehicle_api as vehicle_api
from common.models import VehicleInfo
from vehicle_daemon import app_state
from vehicle_daemon.vehicle_api import VehicleApiClient


@pytest.fixture
def vehicle_list_body(monkeypatch):
    """Serve the vehicle list endpoint from a body chosen by the test."""
    body = {"content": b""}

    def handler(request):
        return httpx.Response(200, content=body["content"])

    client = VehicleApiClient(
        "https://vehicles.test/api/1/", transport=httpx.MockTransport(handler)
    )
    monkeypatch.setattr(vehicle_api, "_client", client)
    return body


def test_list_vehicles_empty(client):
    response = client.get("/api/vehicles")
    assert response.status_code == 200
    assert response.json() == {}


def test_register_vehicle(client):
    response = client.put(
        "/api/vehicles/42",
        json={"option_codes": "RENA,BT85,PPSW", "vin": "5YJSA1", "display_name": "Daily"},
    )
    assert response.status_code == 200
    assert response.json()["vehicle_id"] == "42"
    assert "42" in app_state.vehicles

    listed = client.get("/api/vehicles").json()
    assert listed["42"]["display_name"] == "Daily"


def test_get_vehicle_options(client):
    client.put("/api/vehicles/42", json={"option_codes": "REEU,WTSG"})
    response = client.get("/api/vehicles/42/options")
    assert response.status_code == 200
    data = response.json()
    assert data["option_codes"] == "REEU,WTSG"
    assert data["configuration"]["region"] == "Europe"
    assert data["configuration"]["is_perf_plus"] is True


def test_get_vehicle_report(client):
    client.put("/api/vehicles/42", json={"option_codes": "RENA"})
    response = client.get("/api/vehicles/42/report")
    assert response.status_code == 200
    assert response.text.startswith("    Region: United States\n")


def test_unknown_vehicle(client):
    assert client.get("/api/vehicles/nope/options").status_code == 404
    assert client.get("/api/vehicles/nope/report").status_code == 404


def test_refresh_vehicles(client, mock_vehicle_api):
    mock_vehicle_api.fetch_vehicles.return_value = [
        VehicleInfo(vehicle_id="1", option_codes="RENA"),
        VehicleInfo(vehicle_id="2", option_codes="RENC"),
    ]
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 200
    assert set(response.json()) == {"1", "2"}
    assert str(app_state.get_options("2").region()) == "Canada"


def test_refresh_vehicles_api_error(client, mock_vehicle_api):
    mock_vehicle_api.fetch_vehicles.side_effect = httpx.ConnectError("connection refused")
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 502
    assert "connection refused" in response.json()["detail"]
    assert app_state.vehicles == {}


def test_refresh_vehicles_null_response(client, vehicle_list_body):
    vehicle_list_body["content"] = b'{"response": null}'
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 200
    assert response.json() == {}


@pytest.mark.parametrize("content", [b"<html>maintenance</html>", b'{"response": "down"}'])
def test_refresh_vehicles_unreadable_body(client, vehicle_list_body, content):
    vehicle_list_body["content"] = content
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 502
    assert response.json()["detail"].startswith("Vehicle API error:")
    assert app_state.vehicles == {}


def test_refresh_vehicles_skips_entry_without_id(client, vehicle_list_body):
    vehicle_list_body["content"] = (
        b'{"response": [{"vin": "5YJSA1NOID", "option_codes": "RENA"},'
        b' {"id": 9, "option_codes": "REEU"}]}'
    )
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 200
    assert set(response.json()) == {"9"}
    assert "None" not in app_state.vehicles


def test_refresh_vehicles_value_error(client, mock_vehicle_api):
    mock_vehicle_api.fetch_vehicles.side_effect = ValueError("vehicle list is not a JSON object")
    response = client.post("/api/vehicles/refresh")
    assert response.status_code == 502
