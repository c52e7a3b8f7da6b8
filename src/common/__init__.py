"""
common

This package contains shared models and utilities used across the options2api project.

Modules:
    - models: Defines shared Pydantic models used by multiple components
"""

from .models import CommandResult, VehicleConfiguration, VehicleInfo

__all__ = ["CommandResult", "VehicleConfiguration", "VehicleInfo"]
