"""
Tests for the charge control API router.

The shared vehicle API client is mocked (see the ``mock_vehicle_api`` fixture), so
these tests check which command reaches the vehicle, how refusals and local
rejections are reported, and that every outcome lands in the command log.
"""

import pytest

from common.models import CommandResult, VehicleInfo
from vehicle_daemon import app_state


@pytest.fixture
def vehicle():
    app_state.register_vehicle(VehicleInfo(vehicle_id="42", option_codes="RENA,BT85"))
    return "42"


@pytest.mark.parametrize(
    "action, command",
    [
        ("start", "charge_start"),
        ("stop", "charge_stop"),
        ("max_range", "charge_max_range"),
        ("standard", "charge_standard"),
    ],
)
def test_charge_actions(client, mock_vehicle_api, vehicle, action, command):
    response = client.post(f"/api/vehicles/{vehicle}/charge/{action}")
    assert response.status_code == 200
    assert response.json() == {
        "vehicle_id": "42",
        "command": command,
        "success": True,
        "message": "",
    }
    mock_vehicle_api.send_and_refresh.assert_called_once_with(f"vehicles/42/command/{command}")


def test_charge_action_refused_by_vehicle(client, mock_vehicle_api, vehicle):
    mock_vehicle_api.send_and_refresh.return_value = CommandResult(
        success=False, message="not_charging"
    )
    response = client.post(f"/api/vehicles/{vehicle}/charge/stop")
    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["message"] == "not_charging"


def test_unknown_action(client, mock_vehicle_api, vehicle):
    response = client.post(f"/api/vehicles/{vehicle}/charge/overdrive")
    assert response.status_code == 404
    mock_vehicle_api.send_and_refresh.assert_not_called()


def test_unknown_vehicle(client, mock_vehicle_api):
    response = client.post("/api/vehicles/nope/charge/start")
    assert response.status_code == 404
    mock_vehicle_api.send_and_refresh.assert_not_called()


@pytest.mark.parametrize("percent", [1, 80, 100])
def test_set_charge_limit(client, mock_vehicle_api, vehicle, percent):
    response = client.post(f"/api/vehicles/{vehicle}/charge/limit", json={"percent": percent})
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["command"] == "set_charge_limit"
    mock_vehicle_api.send_and_refresh.assert_called_once_with(
        f"vehicles/42/command/set_charge_limit?percent={percent}"
    )


@pytest.mark.parametrize("percent", [0, 101])
def test_set_charge_limit_out_of_range(client, mock_vehicle_api, vehicle, percent):
    response = client.post(f"/api/vehicles/{vehicle}/charge/limit", json={"percent": percent})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("value out of range")
    mock_vehicle_api.send_and_refresh.assert_not_called()


def test_set_charge_limit_invalid_body(client, mock_vehicle_api, vehicle):
    response = client.post(f"/api/vehicles/{vehicle}/charge/limit", json={"percent": "full"})
    assert response.status_code == 422


def test_command_log(client, mock_vehicle_api, vehicle):
    app_state.register_vehicle(VehicleInfo(vehicle_id="7"))
    client.post("/api/vehicles/42/charge/start")
    client.post("/api/vehicles/7/charge/limit", json={"percent": 101})
    client.post("/api/vehicles/42/charge/stop")

    response = client.get("/api/commands")
    assert response.status_code == 200
    entries = response.json()
    assert [(e["vehicle_id"], e["command"], e["success"]) for e in entries] == [
        ("42", "charge_start", True),
        ("7", "set_charge_limit", False),
        ("42", "charge_stop", True),
    ]

    filtered = client.get("/api/commands", params={"vehicle_id": "42", "limit": 1}).json()
    assert [e["command"] for e in filtered] == ["charge_stop"]


def test_command_log_rejects_bad_limit(client):
    assert client.get("/api/commands", params={"limit": 0}).status_code == 422
