"""
option_decoder
==============

Library for decoding a vehicle's option-code string into typed attributes.

This package contains the core decoding logic: parsing the comma separated option
string returned by the vehicle API into a prefix index, the closed enumerations for
each option category, and the typed queries and text report built on top of them.
Unknown or missing codes never raise; they resolve to an UNKNOWN member or False.

Functions:
    - parse_options: Build an OptionIndex from a raw option string
    - preprocess_options: Apply historical corrections to a raw option string
    - load_option_catalog: Load option descriptions from the bundled catalog
    - describe_options: Describe each token of a raw option string

Classes:
    - OptionIndex: Immutable prefix -> token lookup
    - Options: Typed attribute queries and report
"""

from .decode import (
    OptionIndex,
    describe_options,
    load_option_catalog,
    parse_options,
    preprocess_options,
)
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
from .options import Options

__all__ = [
    "OptionIndex",
    "Options",
    "describe_options",
    "load_option_catalog",
    "parse_options",
    "preprocess_options",
    "CATEGORY_ENUMS",
    "AdapterType",
    "BatteryType",
    "DecorType",
    "DriveSide",
    "OptionEnum",
    "PaintColor",
    "Region",
    "RoofType",
    "SeatType",
    "TrimLevel",
    "WheelType",
]
