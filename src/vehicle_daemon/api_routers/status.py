"""
Manages API routes for health, status and configuration.

This module provides FastAPI endpoints for:
- Liveness and readiness probes.
- Prometheus metrics.
- Server and application status.
- The option catalog in use.
"""

import logging
import os
import time

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from vehicle_daemon import app_state
from vehicle_daemon._version import VERSION
from vehicle_daemon.config import get_catalog_path

logger = logging.getLogger(__name__)

api_router_status = APIRouter()  # Router for health, status and configuration endpoints

SERVER_START_TIME = time.time()


@api_router_status.get("/healthz")
async def healthz():
    """Liveness probe."""
    return JSONResponse(status_code=200, content={"status": "ok"})


@api_router_status.get("/readyz")
async def readyz():
    """
    Readiness probe: 200 once the option catalog is loaded, else 503.
    """
    ready = len(app_state.option_catalog) > 0
    code = 200 if ready else 503
    return JSONResponse(
        status_code=code,
        content={
            "status": "ready" if ready else "pending",
            "catalog_entries": len(app_state.option_catalog),
            "vehicles": len(app_state.vehicles),
        },
    )


@api_router_status.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@api_router_status.get("/config/option_catalog", response_class=PlainTextResponse)
async def get_option_catalog_content():
    """Return the raw option catalog YAML in use."""
    catalog_path = get_catalog_path()
    if not os.path.exists(catalog_path):
        logger.error(f"API Error: Option catalog not found at '{catalog_path}'")
        raise HTTPException(status_code=404, detail="Option catalog not found.")
    try:
        with open(catalog_path, "r") as f:
            return PlainTextResponse(f.read())
    except OSError as e:
        logger.error(f"API Error: Could not read option catalog from '{catalog_path}': {e}")
        raise HTTPException(status_code=500, detail=f"Error reading option catalog: {str(e)}")


@api_router_status.get("/status/server")
async def get_server_status():
    """Returns basic server status information."""
    uptime_seconds = time.time() - SERVER_START_TIME
    return {
        "status": "ok",
        "version": VERSION,
        "server_start_time_unix": SERVER_START_TIME,
        "uptime_seconds": uptime_seconds,
        "message": "options2api server is running.",
    }


@api_router_status.get("/status/application")
async def get_application_status():
    """Returns application-specific status information."""
    return {
        "status": "ok",
        "option_catalog_path": get_catalog_path(),
        "catalog_entry_count": len(app_state.option_catalog),
        "vehicle_count": len(app_state.vehicles),
        "unknown_code_count": len(app_state.unknown_codes),
        "command_log_length": len(app_state.command_log),
    }
