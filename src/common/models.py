"""
common.models

Shared Pydantic models for use across options2api modules.

VehicleInfo:
    Identity of one vehicle as returned by the vehicle list endpoint, including the raw
    option-code string.

VehicleConfiguration:
    The interpreted configuration of a vehicle: every typed attribute query over its
    option codes, in a structured form.

CommandResult:
    Pass/fail outcome of a remote command, with a message.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class VehicleInfo(BaseModel):
    """
    VehicleInfo

    Represents one vehicle known to the account.

    Attributes:
        vehicle_id (str): Identifier used to build command paths.
        vin (Optional[str]): Vehicle Identification Number.
        display_name (Optional[str]): Owner-assigned name.
        option_codes (Optional[str]): Raw comma separated option-code string, if reported.
    """

    vehicle_id: str
    vin: Optional[str] = None
    display_name: Optional[str] = None
    option_codes: Optional[str] = None

    class Config:
        extra = "allow"


class VehicleConfiguration(BaseModel):
    """
    VehicleConfiguration

    Category attributes hold the human-readable description of the resolved member
    ("Unknown" when the code is missing or not recognised).
    """

    region: str
    trim_level: str
    drive_side: str
    is_performance: bool
    is_perf_plus: bool
    has_perf_exterior: bool
    has_perf_powertrain: bool
    battery_type: str
    paint_color: str
    roof_type: str
    wheel_type: str
    seat_type: str
    decor_type: str
    adapter_type: str
    has_air_suspension: bool
    has_tech_package: bool
    has_power_liftgate: bool
    has_premium_lighting: bool
    has_homelink: bool
    has_nav_system: bool
    has_audio_upgrade: bool
    has_sat_radio: bool
    has_supercharger: bool
    has_twin_charger: bool
    has_hpwc: bool
    has_parcel_shelf: bool
    has_paint_armor: bool
    has_third_row: bool
    has_parking_sensors: bool
    has_lighting_package: bool
    has_security_package: bool
    has_cold_weather: bool
    unrecognized_codes: List[str] = Field(default_factory=list)


class CommandResult(BaseModel):
    """Outcome of a command sent to a vehicle."""

    success: bool
    message: str = ""
