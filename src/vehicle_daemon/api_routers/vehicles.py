"""
Defines FastAPI APIRouter for registered vehicles.

This module includes routes for:
- Listing registered vehicles.
- Registering or replacing a vehicle's option codes.
- Retrieving a vehicle's decoded configuration and text report.
- Refreshing the vehicle list from the vehicle API.
"""

import logging
from typing import Dict

import httpx
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from common.models import VehicleInfo
from option_decoder import Options
from vehicle_daemon import app_state
from vehicle_daemon.models import DecodedOptionsResponse, VehicleRegistration
from vehicle_daemon.vehicle_api import get_vehicle_api_client

logger = logging.getLogger(__name__)

api_router_vehicles = APIRouter()


def _require_options(vehicle_id: str) -> Options:
    options = app_state.get_options(vehicle_id)
    if options is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return options


@api_router_vehicles.get("/vehicles", response_model=Dict[str, VehicleInfo])
async def list_vehicles():
    """Return all registered vehicles."""
    return app_state.vehicles


@api_router_vehicles.put("/vehicles/{vehicle_id}", response_model=VehicleInfo)
async def register_vehicle(vehicle_id: str, registration: VehicleRegistration):
    """Register a vehicle, or replace its option codes."""
    info = VehicleInfo(vehicle_id=vehicle_id, **registration.model_dump())
    app_state.register_vehicle(info)
    return info


@api_router_vehicles.get("/vehicles/{vehicle_id}/options", response_model=DecodedOptionsResponse)
async def get_vehicle_options(vehicle_id: str):
    """
    Return the decoded configuration of a registered vehicle.

    Raises:
        HTTPException: If the vehicle is not registered.
    """
    options = _require_options(vehicle_id)
    return DecodedOptionsResponse(
        option_codes=app_state.vehicles[vehicle_id].option_codes,
        configuration=options.to_configuration(),
        report=options.report(),
        malformed_tokens=list(options.index.malformed),
    )


@api_router_vehicles.get("/vehicles/{vehicle_id}/report", response_class=PlainTextResponse)
async def get_vehicle_report(vehicle_id: str):
    """Return the text report of a registered vehicle."""
    return _require_options(vehicle_id).report()


@api_router_vehicles.post("/vehicles/refresh", response_model=Dict[str, VehicleInfo])
def refresh_vehicles():
    """
    Fetch the vehicle list from the vehicle API and register every vehicle.

    Raises:
        HTTPException: 502 if the vehicle API cannot be reached, answers with an error,
            or returns a body that is not a vehicle list.
    """
    try:
        fetched = get_vehicle_api_client().fetch_vehicles()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Vehicle refresh failed: {e}")
        raise HTTPException(status_code=502, detail=f"Vehicle API error: {e}")
    for info in fetched:
        app_state.register_vehicle(info)
    return app_state.vehicles
