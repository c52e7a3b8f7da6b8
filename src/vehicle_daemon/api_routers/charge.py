"""
Defines FastAPI APIRouter for vehicle charge control.

This module includes routes for:
- Starting and stopping charging.
- Switching between max-range and standard-range charging.
- Setting the charge limit percentage.
- Listing the history of commands sent.

Commands are sent through ChargeController using the shared vehicle API client.
A command the vehicle refuses is still a 200 response with ``success: false``.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from common.models import CommandResult
from vehicle_daemon import app_state
from vehicle_daemon.charge_controller import ChargeCommand, ChargeController
from vehicle_daemon.models import ChargeCommandResponse, ChargeLimitRequest, CommandLogEntry
from vehicle_daemon.vehicle_api import get_vehicle_api_client

logger = logging.getLogger(__name__)

api_router_charge = APIRouter()

# URL action -> command, for the parameterless commands
_SIMPLE_ACTIONS = {
    "start": ChargeCommand.START,
    "stop": ChargeCommand.STOP,
    "max_range": ChargeCommand.MAX_RANGE,
    "standard": ChargeCommand.STANDARD_RANGE,
}


def _controller_for(vehicle_id: str) -> ChargeController:
    if app_state.get_vehicle(vehicle_id) is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return ChargeController(vehicle_id, get_vehicle_api_client().send_and_refresh)


def _respond(vehicle_id: str, command: ChargeCommand, result: CommandResult):
    app_state.record_command(vehicle_id, command.value, result)
    return ChargeCommandResponse(
        vehicle_id=vehicle_id,
        command=command.value,
        success=result.success,
        message=result.message,
    )


@api_router_charge.post("/vehicles/{vehicle_id}/charge/limit", response_model=ChargeCommandResponse)
def set_charge_limit(vehicle_id: str, request: ChargeLimitRequest):
    """Set the charge limit. Values outside 1-100 fail without contacting the vehicle."""
    controller = _controller_for(vehicle_id)
    result = controller.set_charge_percent(request.percent)
    return _respond(vehicle_id, ChargeCommand.SET_LIMIT, result)


@api_router_charge.post(
    "/vehicles/{vehicle_id}/charge/{action}", response_model=ChargeCommandResponse
)
def charge_action(vehicle_id: str, action: str):
    """
    Run a parameterless charge command: start, stop, max_range or standard.

    Raises:
        HTTPException: 404 for an unknown vehicle or action.
    """
    command = _SIMPLE_ACTIONS.get(action)
    if command is None:
        raise HTTPException(status_code=404, detail=f"Unknown charge action '{action}'")
    controller = _controller_for(vehicle_id)
    return _respond(vehicle_id, command, controller.issue(command))


@api_router_charge.get("/commands", response_model=List[CommandLogEntry])
async def list_commands(
    vehicle_id: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, description="Max number of entries to return"),
):
    """Return the most recent commands, oldest first."""
    return app_state.get_command_log(vehicle_id=vehicle_id, limit=limit)
