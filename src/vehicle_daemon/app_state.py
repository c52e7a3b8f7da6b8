"""
Manages the in-memory application state for the options2api daemon.

This module holds the registered vehicles and their decoded options, counts of
option codes the decoder did not recognise, the option catalog loaded at startup,
and a bounded history of commands sent to vehicles. It provides functions to
initialize, update, and access this shared state.
"""

import logging
import time
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from common.models import CommandResult, VehicleInfo
from option_decoder import Options
from vehicle_daemon.metrics import MALFORMED_TOKENS, OPTION_DECODES, UNKNOWN_CODES, VEHICLE_COUNT

logger = logging.getLogger(__name__)

MAX_COMMAND_LOG_LENGTH: int = 500
MAX_UNKNOWN_CODES: int = 1000

# Registered vehicles, keyed by vehicle_id
vehicles: Dict[str, VehicleInfo] = {}

# Decoded options per vehicle, built once when the vehicle is registered
vehicle_options: Dict[str, Options] = {}

# Option codes no query recognised: code -> number of times seen.
# Holds at most MAX_UNKNOWN_CODES distinct codes; later new codes are only counted.
unknown_codes: Dict[str, int] = {}

# code -> description, loaded from the option catalog at startup
option_catalog: Dict[str, str] = {}

# Most recent commands, oldest first. Each: {timestamp, vehicle_id, command, success, message}
command_log: Deque[Dict[str, Any]] = deque(maxlen=MAX_COMMAND_LOG_LENGTH)


def initialize_app_from_config(catalog: Dict[str, str], known_vehicles=None):
    """
    Populate application state from configuration loaded at startup.

    Args:
        catalog: Flattened option catalog (code -> description).
        known_vehicles: Optional iterable of VehicleInfo to register immediately.
    """
    global option_catalog
    option_catalog = dict(catalog)
    logger.info(f"Application state initialized with {len(option_catalog)} catalog entries.")
    for info in known_vehicles or []:
        register_vehicle(info)


def decode_option_codes(raw: Optional[str]) -> Options:
    """
    Decode an option-code string and record what the decoder could not place.
    """
    options = Options(raw)
    OPTION_DECODES.inc()
    if options.index.malformed:
        MALFORMED_TOKENS.inc(len(options.index.malformed))
        logger.debug(f"Skipped malformed option tokens: {list(options.index.malformed)}")
    record_unknown_codes(options.unrecognized_codes())
    return options


def record_unknown_codes(codes: List[str]):
    for code in codes:
        UNKNOWN_CODES.inc()
        if code not in unknown_codes:
            if len(unknown_codes) >= MAX_UNKNOWN_CODES:
                logger.debug(f"Unknown code table full, not tracking option code {code[:32]!r}")
                continue
            logger.info(f"First sighting of unrecognised option code '{code}'")
            unknown_codes[code] = 0
        unknown_codes[code] += 1


def register_vehicle(info: VehicleInfo) -> Options:
    """
    Add or replace a vehicle and decode its option codes.

    Returns:
        The decoded Options for the vehicle.
    """
    options = decode_option_codes(info.option_codes)
    vehicles[info.vehicle_id] = info
    vehicle_options[info.vehicle_id] = options
    VEHICLE_COUNT.set(len(vehicles))
    logger.info(f"Registered vehicle {info.vehicle_id} ({len(options.index)} option keys)")
    return options


def get_vehicle(vehicle_id: str) -> Optional[VehicleInfo]:
    return vehicles.get(vehicle_id)


def get_options(vehicle_id: str) -> Optional[Options]:
    return vehicle_options.get(vehicle_id)


def record_command(vehicle_id: str, command: str, result: CommandResult):
    """Append a command outcome to the bounded command log."""
    command_log.append(
        {
            "timestamp": time.time(),
            "vehicle_id": vehicle_id,
            "command": command,
            "success": result.success,
            "message": result.message,
        }
    )


def get_command_log(vehicle_id: Optional[str] = None, limit: int = 100) -> List[Dict[str, Any]]:
    """Most recent commands, optionally filtered by vehicle, oldest first."""
    if limit <= 0:
        return []
    entries = [e for e in command_log if vehicle_id is None or e["vehicle_id"] == vehicle_id]
    return entries[-limit:]
