"""
option_decoder.options

Typed queries over a decoded option-code string.

Options wraps an OptionIndex and answers one question per attribute: a category query
returns a member of the matching enumeration (UNKNOWN when the code is missing or not
known), a boolean query returns whether the option is present and enabled. No query
raises.
"""

from typing import List, Optional, Type

from common.models import VehicleConfiguration

from .decode import OptionIndex, parse_options
from .enums import (
    CATEGORY_ENUMS,
    AdapterType,
    BatteryType,
    DecorType,
    DriveSide,
    OptionEnum,
    PaintColor,
    Region,
    RoofType,
    SeatType,
    TrimLevel,
    WheelType,
)

# Prefixes of the standard on/off options (variant 01 = enabled, 00 = not fitted).
BOOLEAN_PREFIXES = frozenset(
    ["PF", "PX", "TR", "SU", "SC", "TP", "AU", "CH", "HP", "PA", "PS", "PK", "LP", "SP", "CW"]
)

# Legacy flat flags understood by the queries below.
LEGACY_FLAGS = frozenset(["X001", "X003", "X007", "X011", "X013", "X019", "X024"])

REPORT_TEMPLATE = (
    "    Region: {region}\n"
    "    Trim: {trim}\n"
    "    Drive Side: {drive_side}\n"
    "    Performance Options: [\n"
    "       Performance: {performance}\n"
    "       Performance+: {perf_plus}\n"
    "       Performance Exterior: {perf_exterior}\n"
    "       Performance Powertrain: {perf_powertrain}\n"
    "    ]\n"
    "    Battery: {battery}\n"
    "    Color: {color}\n"
    "    Roof: {roof}\n"
    "    Wheels: {wheels}\n"
    "    Seats: {seats}\n"
    "    Decor: {decor}\n"
    "    Air Suspension: {air_suspension}\n"
    "    Tech Upgrades: [\n"
    "        Tech Package: {tech_package}\n"
    "        Power Liftgate: {power_liftgate}\n"
    "        Premium Lighting: {premium_lighting}\n"
    "        HomeLink: {homelink}\n"
    "        Navigation: {navigation}\n"
    "    ]\n"
    "    Audio: [\n"
    "        Upgraded: {audio_upgrade}\n"
    "        Sat Radio: {sat_radio}\n"
    "    ]\n"
    "    Charging: [\n"
    "        Supercharger: {supercharger}\n"
    "        Twin Chargers: {twin_charger}\n"
    "        HPWC: {hpwc}\n"
    "    ]\n"
    "    Options: [\n"
    "        Parcel Shelf: {parcel_shelf}\n"
    "        Paint Armor: {paint_armor}\n"
    "        Third Row Seating: {third_row}\n"
    "    ]\n"
    "    Newer Options: [\n"
    "        Parking Sensors: {parking_sensors}\n"
    "        Lighting Package: {lighting_package}\n"
    "        Security Package: {security_package}\n"
    "        Cold Weather Package: {cold_weather}\n"
    "    ]\n"
)


def _flag(value: bool) -> str:
    # booleans are rendered lowercase in the report
    return "true" if value else "false"


class Options:
    """
    The interpreted configuration of one vehicle.

    Built from the raw option-code string (which may be None). Many categories are
    represented by enumerations that carry an UNKNOWN member, so if the backend adds
    a new paint color it is reported as Unknown until the enumeration is updated.
    """

    def __init__(self, raw: Optional[str] = None):
        self.index = parse_options(raw)

    @classmethod
    def from_index(cls, index: OptionIndex) -> "Options":
        options = cls.__new__(cls)
        options.index = index
        return options

    # ── Primitive lookups ──────────────────────────────────────────────────

    def has_option(self, name: str) -> bool:
        return self.index.has_option(name)

    def option_to_enum(self, enum_cls: Type[OptionEnum], *prefixes: str) -> OptionEnum:
        """
        Resolve a category from the first of ``prefixes`` present in the index.

        For example ``option_to_enum(Region, "RE")`` finds the token stored for "RE"
        (say "RENA") and returns ``Region.RENA``. Missing or unknown codes give
        ``enum_cls.UNKNOWN``.
        """
        return enum_cls.from_code(self.index.first_option(*prefixes))

    # ── Categories ─────────────────────────────────────────────────────────

    def region(self) -> Region:
        return self.option_to_enum(Region, "RE")

    def trim_level(self) -> TrimLevel:
        return self.option_to_enum(TrimLevel, "TM")

    def drive_side(self) -> DriveSide:
        return self.option_to_enum(DriveSide, "DR")

    def battery_type(self) -> BatteryType:
        return self.option_to_enum(BatteryType, "BT")

    def roof_type(self) -> RoofType:
        return self.option_to_enum(RoofType, "RF")

    def wheel_type(self) -> WheelType:
        return self.option_to_enum(WheelType, "WT")

    def decor_type(self) -> DecorType:
        return self.option_to_enum(DecorType, "ID")

    def adapter_type(self) -> AdapterType:
        return self.option_to_enum(AdapterType, "AD")

    def paint_color(self) -> PaintColor:
        return self.option_to_enum(PaintColor, "PB", "PM", "PP")

    def seat_type(self) -> SeatType:
        return self.option_to_enum(SeatType, "IB", "IP", "IZ", "IS")

    # ── Boolean options ────────────────────────────────────────────────────

    def is_performance(self) -> bool:
        return self.has_option("PF")

    def is_perf_plus(self) -> bool:
        return self.has_option("PX") or self.wheel_type() is WheelType.WTSG

    def has_third_row(self) -> bool:
        return self.has_option("TR")

    def has_air_suspension(self) -> bool:
        return self.has_option("SU")

    def has_supercharger(self) -> bool:
        return self.has_option("SC")

    def has_tech_package(self) -> bool:
        return self.has_option("TP")

    def has_audio_upgrade(self) -> bool:
        return self.has_option("AU")

    def has_twin_charger(self) -> bool:
        return self.has_option("CH")

    def has_hpwc(self) -> bool:
        return self.has_option("HP")

    def has_paint_armor(self) -> bool:
        return self.has_option("PA")

    def has_parcel_shelf(self) -> bool:
        return self.has_option("PS")

    def has_power_liftgate(self) -> bool:
        return self.has_option("X001")

    def has_nav_system(self) -> bool:
        return self.has_option("X003")

    def has_premium_lighting(self) -> bool:
        return self.has_option("X007")

    def has_homelink(self) -> bool:
        return self.has_option("X011")

    def has_sat_radio(self) -> bool:
        return self.has_option("X013")

    def has_perf_exterior(self) -> bool:
        return self.has_option("X019")

    def has_perf_powertrain(self) -> bool:
        return self.has_option("X024")

    # Speculative: seen in newer option strings, meaning not confirmed.
    def has_parking_sensors(self) -> bool:
        return self.has_option("PK")

    def has_lighting_package(self) -> bool:
        return self.has_option("LP")

    def has_security_package(self) -> bool:
        return self.has_option("SP")

    def has_cold_weather(self) -> bool:
        return self.has_option("CW")

    # ── Reporting ──────────────────────────────────────────────────────────

    def unrecognized_codes(self) -> List[str]:
        """
        Tokens no query understands, in input order.

        Codes outside every category table, standard options with a variant other
        than 00/01, and legacy flags nobody reads end up here.
        """
        known = set()
        for enum_cls in CATEGORY_ENUMS:
            known |= enum_cls.known_codes()

        unrecognized = []
        for token in self.index.tokens:
            if token in known or token in LEGACY_FLAGS:
                continue
            if token[:2] in BOOLEAN_PREFIXES and token[2:] in ("00", "01"):
                continue
            unrecognized.append(token)
        return unrecognized

    def to_configuration(self) -> VehicleConfiguration:
        return VehicleConfiguration(
            region=str(self.region()),
            trim_level=str(self.trim_level()),
            drive_side=str(self.drive_side()),
            is_performance=self.is_performance(),
            is_perf_plus=self.is_perf_plus(),
            has_perf_exterior=self.has_perf_exterior(),
            has_perf_powertrain=self.has_perf_powertrain(),
            battery_type=str(self.battery_type()),
            paint_color=str(self.paint_color()),
            roof_type=str(self.roof_type()),
            wheel_type=str(self.wheel_type()),
            seat_type=str(self.seat_type()),
            decor_type=str(self.decor_type()),
            adapter_type=str(self.adapter_type()),
            has_air_suspension=self.has_air_suspension(),
            has_tech_package=self.has_tech_package(),
            has_power_liftgate=self.has_power_liftgate(),
            has_premium_lighting=self.has_premium_lighting(),
            has_homelink=self.has_homelink(),
            has_nav_system=self.has_nav_system(),
            has_audio_upgrade=self.has_audio_upgrade(),
            has_sat_radio=self.has_sat_radio(),
            has_supercharger=self.has_supercharger(),
            has_twin_charger=self.has_twin_charger(),
            has_hpwc=self.has_hpwc(),
            has_parcel_shelf=self.has_parcel_shelf(),
            has_paint_armor=self.has_paint_armor(),
            has_third_row=self.has_third_row(),
            has_parking_sensors=self.has_parking_sensors(),
            has_lighting_package=self.has_lighting_package(),
            has_security_package=self.has_security_package(),
            has_cold_weather=self.has_cold_weather(),
            unrecognized_codes=self.unrecognized_codes(),
        )

    def report(self) -> str:
        """Multi-line summary of every attribute, in a fixed order."""
        return REPORT_TEMPLATE.format(
            region=str(self.region()),
            trim=str(self.trim_level()),
            drive_side=str(self.drive_side()),
            performance=_flag(self.is_performance()),
            perf_plus=_flag(self.is_perf_plus()),
            perf_exterior=_flag(self.has_perf_exterior()),
            perf_powertrain=_flag(self.has_perf_powertrain()),
            battery=str(self.battery_type()),
            color=str(self.paint_color()),
            roof=str(self.roof_type()),
            wheels=str(self.wheel_type()),
            seats=str(self.seat_type()),
            decor=str(self.decor_type()),
            air_suspension=_flag(self.has_air_suspension()),
            tech_package=_flag(self.has_tech_package()),
            power_liftgate=_flag(self.has_power_liftgate()),
            premium_lighting=_flag(self.has_premium_lighting()),
            homelink=_flag(self.has_homelink()),
            navigation=_flag(self.has_nav_system()),
            audio_upgrade=_flag(self.has_audio_upgrade()),
            sat_radio=_flag(self.has_sat_radio()),
            supercharger=_flag(self.has_supercharger()),
            twin_charger=_flag(self.has_twin_charger()),
            hpwc=_flag(self.has_hpwc()),
            parcel_shelf=_flag(self.has_parcel_shelf()),
            paint_armor=_flag(self.has_paint_armor()),
            third_row=_flag(self.has_third_row()),
            parking_sensors=_flag(self.has_parking_sensors()),
            lighting_package=_flag(self.has_lighting_package()),
            security_package=_flag(self.has_security_package()),
            cold_weather=_flag(self.has_cold_weather()),
        )

    def __str__(self) -> str:
        return self.report()
