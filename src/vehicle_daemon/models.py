"""
Defines Pydantic models for API request/response validation and serialization.

Models:
    - OptionCodesRequest: Raw option-code string submitted for decoding
    - DecodedOptionsResponse: Structured configuration plus the text report
    - OptionDescription: One option token and its description
    - VehicleRegistration: Option codes (and metadata) registered for a vehicle
    - ChargeLimitRequest: Requested charge limit percentage
    - ChargeCommandResponse: Outcome of a charge command for a vehicle
    - CommandLogEntry: One entry of the command history
    - VehicleInfo, VehicleConfiguration, CommandResult: (re-exported from common.models)
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from common.models import CommandResult, VehicleConfiguration, VehicleInfo

__all__ = [
    "OptionCodesRequest",
    "DecodedOptionsResponse",
    "OptionDescription",
    "VehicleRegistration",
    "ChargeLimitRequest",
    "ChargeCommandResponse",
    "CommandLogEntry",
    "CommandResult",
    "VehicleConfiguration",
    "VehicleInfo",
]


class OptionCodesRequest(BaseModel):
    """A raw option-code string, as returned by the vehicle API."""

    option_codes: Optional[str] = Field(
        None,
        description="Comma separated option codes, e.g. 'MS01,RENA,TM00,BT85'. Null is allowed.",
    )


class DecodedOptionsResponse(BaseModel):
    """Decoded configuration of one option-code string."""

    option_codes: Optional[str] = None
    configuration: VehicleConfiguration
    report: str
    malformed_tokens: List[str] = Field(default_factory=list)


class OptionDescription(BaseModel):
    code: str
    description: Optional[str] = None


class VehicleRegistration(BaseModel):
    """Registers or replaces the option codes known for a vehicle."""

    option_codes: Optional[str] = None
    vin: Optional[str] = None
    display_name: Optional[str] = None


class ChargeLimitRequest(BaseModel):
    # Range is checked by the charge controller so the rejection is reported
    # as a failed command rather than a validation error.
    percent: int


class ChargeCommandResponse(BaseModel):
    """Response model for charge commands, confirming the action taken."""

    vehicle_id: str
    command: str
    success: bool
    message: str


class CommandLogEntry(BaseModel):
    timestamp: float
    vehicle_id: str
    command: str
    success: bool
    message: str
