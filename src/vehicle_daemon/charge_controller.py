"""
Charge control for a single vehicle.

ChargeController turns a charging intent (start, stop, max range, standard range,
set a charge limit) into one command path for the vehicle API and reports whether
it succeeded. Sending the command, and refreshing vehicle state afterwards, is
delegated to the ``sender`` callable supplied by the caller.

Charge limits outside 1-100 percent are rejected here without contacting the vehicle.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from common.models import CommandResult
from vehicle_daemon.metrics import COMMAND_LATENCY, COMMANDS_REJECTED, COMMANDS_SENT

logger = logging.getLogger(__name__)

MIN_CHARGE_PERCENT = 1
MAX_CHARGE_PERCENT = 100

CommandSender = Callable[[str], CommandResult]


class ChargeCommand(str, Enum):
    """The charge commands a vehicle accepts."""

    START = "charge_start"
    STOP = "charge_stop"
    MAX_RANGE = "charge_max_range"
    STANDARD_RANGE = "charge_standard"
    SET_LIMIT = "set_charge_limit"


def command_path(vehicle_id: str, name: str) -> str:
    """Relative API path of a vehicle command, e.g. ``vehicles/42/command/charge_start``."""
    return f"vehicles/{vehicle_id}/command/{name}"


class ChargeController:
    """
    Control charging parameters and start/stop charging.

    Args:
        vehicle_id: Identifier of the vehicle, used in every command path.
        sender: Sends one command path and returns its CommandResult.
    """

    def __init__(self, vehicle_id: str, sender: CommandSender):
        self.vehicle_id = vehicle_id
        self.sender = sender
        self.start_command = command_path(vehicle_id, ChargeCommand.START.value)
        self.stop_command = command_path(vehicle_id, ChargeCommand.STOP.value)
        self.max_range_command = command_path(vehicle_id, ChargeCommand.MAX_RANGE.value)
        self.std_range_command = command_path(vehicle_id, ChargeCommand.STANDARD_RANGE.value)
        self.charge_percent_format = command_path(
            vehicle_id, ChargeCommand.SET_LIMIT.value + "?percent={percent}"
        )

    def _send(self, command: ChargeCommand, path: str) -> CommandResult:
        with COMMAND_LATENCY.time():
            result = self.sender(path)
        COMMANDS_SENT.labels(
            command=command.value, result="success" if result.success else "failure"
        ).inc()
        if result.success:
            logger.info(f"Vehicle {self.vehicle_id}: '{command.value}' succeeded")
        else:
            logger.warning(
                f"Vehicle {self.vehicle_id}: '{command.value}' failed: {result.message}"
            )
        return result

    def set_charge_state(self, charging: bool) -> CommandResult:
        if charging:
            return self._send(ChargeCommand.START, self.start_command)
        return self._send(ChargeCommand.STOP, self.stop_command)

    def start_charging(self) -> CommandResult:
        return self.set_charge_state(True)

    def stop_charging(self) -> CommandResult:
        return self.set_charge_state(False)

    def set_charge_range(self, max_range: bool) -> CommandResult:
        if max_range:
            return self._send(ChargeCommand.MAX_RANGE, self.max_range_command)
        return self._send(ChargeCommand.STANDARD_RANGE, self.std_range_command)

    def set_charge_percent(self, percent: int) -> CommandResult:
        if percent < MIN_CHARGE_PERCENT or percent > MAX_CHARGE_PERCENT:
            COMMANDS_REJECTED.labels(command=ChargeCommand.SET_LIMIT.value).inc()
            message = (
                f"value out of range: charge limit must be between "
                f"{MIN_CHARGE_PERCENT} and {MAX_CHARGE_PERCENT} percent, got {percent}"
            )
            logger.warning(f"Vehicle {self.vehicle_id}: {message}")
            return CommandResult(success=False, message=message)
        return self._send(
            ChargeCommand.SET_LIMIT, self.charge_percent_format.format(percent=percent)
        )

    def issue(self, command: ChargeCommand, percent: Optional[int] = None) -> CommandResult:
        """
        Issue one of the charge commands by name.

        ``percent`` is required for SET_LIMIT and ignored otherwise. An unknown command
        name gives a failed result.
        """
        try:
            command = ChargeCommand(command)
        except ValueError:
            logger.warning(f"Vehicle {self.vehicle_id}: unknown command '{command}'")
            return CommandResult(success=False, message=f"unknown command '{command}'")
        if command is ChargeCommand.START:
            return self.start_charging()
        if command is ChargeCommand.STOP:
            return self.stop_charging()
        if command is ChargeCommand.MAX_RANGE:
            return self.set_charge_range(True)
        if command is ChargeCommand.STANDARD_RANGE:
            return self.set_charge_range(False)
        if percent is None:
            COMMANDS_REJECTED.labels(command=command.value).inc()
            return CommandResult(success=False, message="percent is required for set_charge_limit")
        return self.set_charge_percent(percent)
