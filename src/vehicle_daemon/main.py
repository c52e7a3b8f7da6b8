#!/usr/bin/env python3
"""
Main entry point for the options2api daemon.

This script initializes and runs the FastAPI application that decodes vehicle
option-code strings and forwards charge commands to the vehicle API.

Key responsibilities include:
- Configuring application-wide logging.
- Loading the option catalog.
- Initializing shared application state (see app_state.py).
- Initializing the FastAPI application, including:
    - Setting up Prometheus metrics middleware.
    - Registering API routers (options, vehicles, charge, status).
    - Closing the vehicle API client on shutdown.
- Providing a command-line interface to start the Uvicorn server.
"""
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import PlainTextResponse

from option_decoder import load_option_catalog
from vehicle_daemon.app_state import initialize_app_from_config
from vehicle_daemon.config import configure_logger, get_catalog_path, get_fastapi_config
from vehicle_daemon.middleware import prometheus_http_middleware
from vehicle_daemon.vehicle_api import close_vehicle_api_client

from .api_routers.charge import api_router_charge
from .api_routers.options import api_router_options
from .api_routers.status import api_router_status
from .api_routers.vehicles import api_router_vehicles

# ── Logging ──────────────────────────────────────────────────────────────────
logger = configure_logger()

logger.info("options2api starting up...")

# ── Load option catalog ──────────────────────────────────────────────────────
initialize_app_from_config(load_option_catalog(get_catalog_path()))


def create_app():
    # ── FastAPI setup ──────────────────────────────────────────────────────────
    fastapi_config = get_fastapi_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # --- Shutdown ---
        close_vehicle_api_client()
        logger.info("options2api shutting down...")

    app = FastAPI(
        title=fastapi_config["title"],
        servers=[{"url": "/", "description": fastapi_config["server_description"]}],
        root_path=fastapi_config["root_path"],
        lifespan=lifespan,
    )

    # ── Middleware ─────────────────────────────────────────────────────────────
    @app.middleware("http")
    async def prometheus_middleware_handler(request, call_next):
        """Prometheus metrics middleware for HTTP requests."""
        return await prometheus_http_middleware(request, call_next)

    # ── Exception Handlers ─────────────────────────────────────────────────────
    @app.exception_handler(ResponseValidationError)
    async def validation_exception_handler(request, exc):
        """Handles response validation errors with a plain text message."""
        return PlainTextResponse(f"Validation error: {exc}", status_code=500)

    # ── API Routers ────────────────────────────────────────────────────────────
    # Probes and metrics stay at the root so orchestrators need no prefix.
    app.include_router(api_router_status)
    app.include_router(api_router_options, prefix="/api")
    app.include_router(api_router_vehicles, prefix="/api")
    app.include_router(api_router_charge, prefix="/api")

    return app


app = create_app()


# ── Entrypoint ─────────────────────────────────────────────────────────────
def main():
    """
    Main function to run the Uvicorn server for the options2api application.

    Retrieves host, port, and log level from environment variables or defaults,
    then starts the Uvicorn server.
    """
    host = os.getenv("OPTIONS2API_HOST", "0.0.0.0")
    port = int(os.getenv("OPTIONS2API_PORT", "8000"))
    log_level = os.getenv("OPTIONS2API_LOG_LEVEL", "info").lower()

    logger.info(f"Starting Uvicorn server on {host}:{port} with log level '{log_level}'")
    uvicorn.run(app, host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    main()
