"""
option_decoder.enums

Closed enumerations for the option categories found in a vehicle's option-code string.

Every category carries a mandatory UNKNOWN member. Conversion from a code string is
total: an unrecognised or missing code resolves to UNKNOWN instead of raising, so a
new paint color or wheel added by the backend shows up as "Unknown" until the table
below is updated.

Classes:
    - OptionEnum: Base class providing the (code, description) member layout and
      the total from_code conversion
    - Region, TrimLevel, DriveSide, BatteryType, RoofType, WheelType, DecorType,
      AdapterType, PaintColor, SeatType: the known categories
"""

from enum import Enum
from typing import Optional


class OptionEnum(Enum):
    """
    Base for option categories.

    Members are declared as ``CODE = ("CODE", "Description")``. ``str(member)``
    returns the description, ``member.code`` the full option code.
    """

    def __new__(cls, code: Optional[str], description: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.description = description
        return obj

    @property
    def code(self) -> Optional[str]:
        return self._value_

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @classmethod
    def from_code(cls, code: Optional[str]) -> "OptionEnum":
        """Return the member for ``code``, or UNKNOWN if the code is absent or not known."""
        return cls(code)

    @classmethod
    def describe(cls, code: Optional[str]) -> str:
        return cls.from_code(code).description

    @classmethod
    def known_codes(cls) -> frozenset:
        return frozenset(m.code for m in cls if m.code is not None)

    def __str__(self) -> str:
        return self.description


class Region(OptionEnum):
    RENA = ("RENA", "United States")
    RENC = ("RENC", "Canada")
    REEU = ("REEU", "Europe")
    UNKNOWN = (None, "Unknown")


class TrimLevel(OptionEnum):
    TM00 = ("TM00", "Standard Production Trim")
    TM02 = ("TM02", "Signature Performance Trim")
    UNKNOWN = (None, "Unknown")


class DriveSide(OptionEnum):
    DRLH = ("DRLH", "Left Hand")
    DRRH = ("DRRH", "Right Hand")
    UNKNOWN = (None, "Unknown")


class BatteryType(OptionEnum):
    BT85 = ("BT85", "85kWh")
    BT60 = ("BT60", "60kWh")
    BT40 = ("BT40", "40kWh (Software Limited)")
    UNKNOWN = (None, "Unknown")


class RoofType(OptionEnum):
    RFBC = ("RFBC", "Body Color")
    RFPO = ("RFPO", "Panoramic")
    RFBK = ("RFBK", "Black")
    UNKNOWN = (None, "Unknown")


class WheelType(OptionEnum):
    WT1P = ("WT1P", 'Silver 19"')
    WTX1 = ("WTX1", 'Silver 19"')
    WT19 = ("WT19", 'Silver 19"')
    WT21 = ("WT21", 'Silver 21"')
    WTSP = ("WTSP", 'Gray 21"')
    WTSG = ("WTSG", 'Gray Perf+ 21"')
    WTAE = ("WTAE", 'Aero 19"')
    WTTB = ("WTTB", 'Cyclone 19"')
    UNKNOWN = (None, "Unknown")


class DecorType(OptionEnum):
    IDCF = ("IDCF", "Carbon Fiber")
    IDLW = ("IDLW", "Lacewood")
    IDOM = ("IDOM", "Obeche Matte")
    IDOG = ("IDOG", "Obeche Gloss")
    IDPB = ("IDPB", "Piano Black")
    UNKNOWN = (None, "Unknown")


class AdapterType(OptionEnum):
    AD02 = ("AD02", "NEMA 14-50")
    UNKNOWN = (None, "Unknown")


class PaintColor(OptionEnum):
    PBSB = ("PBSB", "Black")
    PBCW = ("PBCW", "Solid White")
    PMSS = ("PMSS", "Silver")
    PMTG = ("PMTG", "Metallic Dolphin Gray")
    PMAB = ("PMAB", "Metallic Brown")
    PMMB = ("PMMB", "Metallic Blue")
    PMSG = ("PMSG", "Metallic Green")
    PPSW = ("PPSW", "Pearl White")
    PPMR = ("PPMR", "Premium Multicoat Red")
    PPSR = ("PPSR", "Premium Signature Red")
    UNKNOWN = (None, "Unknown")


class SeatType(OptionEnum):
    IBMB = ("IBMB", "Base Textile, Black")
    IPMB = ("IPMB", "Leather, Black")
    IPMG = ("IPMG", "Leather, Gray")
    IPMT = ("IPMT", "Leather, Tan")
    IZZW = ("IZZW", "Perf Leather with Grey Piping, White")
    QZMB = ("QZMB", "Perf Leather with Piping, Black")
    IZMB = ("IZMB", "Perf Leather with Piping, Black")
    IZMG = ("IZMG", "Perf Leather with Piping, Gray")
    IZMT = ("IZMT", "Perf Leather with Piping, Tan")
    ISZW = ("ISZW", "Signature Perforated Leather, White")
    ISZT = ("ISZT", "Signature Perforated Leather, Tan")
    ISZB = ("ISZB", "Signature Perforated Leather, Black")
    UNKNOWN = (None, "Unknown")


CATEGORY_ENUMS = (
    Region,
    TrimLevel,
    DriveSide,
    BatteryType,
    RoofType,
    WheelType,
    DecorType,
    AdapterType,
    PaintColor,
    SeatType,
)
