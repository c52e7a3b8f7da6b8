"""
api_routers

This package contains FastAPI APIRouter modules that define the API endpoints
for the options2api application. Each router handles one area of functionality.

Routers:
    - options: Decoding and describing option-code strings
    - vehicles: Registered vehicles and their decoded configuration
    - charge: Charge control commands and command history
    - status: Health, readiness, metrics and status endpoints
"""

from .charge import api_router_charge
from .options import api_router_options
from .status import api_router_status
from .vehicles import api_router_vehicles

__all__ = ["api_router_charge", "api_router_options", "api_router_status", "api_router_vehicles"]
