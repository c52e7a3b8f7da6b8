"""
vehicle_daemon

API service for options2api: a FastAPI daemon that decodes vehicle option-code
strings and forwards charge commands to the vehicle API.

Modules:
    - app_state: Registered vehicles, unknown-code counts and command history
    - charge_controller: Charge commands for one vehicle
    - config: Logging and environment configuration
    - main: FastAPI application setup and server entry point
    - metrics: Prometheus metrics
    - middleware: HTTP metrics middleware
    - models: Pydantic models for API request/response validation
    - vehicle_api: HTTP client for the vehicle API
"""

from ._version import VERSION
from .charge_controller import ChargeCommand, ChargeController
from .config import configure_logger, get_catalog_path

__all__ = [
    "VERSION",
    "ChargeCommand",
    "ChargeController",
    "configure_logger",
    "get_catalog_path",
]
