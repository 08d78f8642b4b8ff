"""Feasibility checks run on the raw payload before any scheduling.

Passing these checks is necessary but not sufficient: the allocator may still
leave part of a device's duration unplaced.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from smarthome.io.schema import HomeInput
from smarthome.planning.calendar import HOURS_PER_DAY, MODE_HOURS


class ScheduleInputError(ValueError):
    """Base class for rejected scheduling inputs."""
    code: str = "ERR-0"
    kind: str = "InvalidInput"

    def __init__(self, message: str, device_id: Optional[str] = None):
        super().__init__(f"{self.code}: {message}")
        self.message = message
        self.device_id = device_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "kind": self.kind,
            "message": self.message,
            "device_id": self.device_id,
        }


class PowerExceedsMaxError(ScheduleInputError):
    code = "ERR-1"
    kind = "PowerExceedsMax"


class DurationExceedsDayError(ScheduleInputError):
    code = "ERR-2"
    kind = "DurationExceedsDay"


class DurationExceedsModeError(ScheduleInputError):
    code = "ERR-3"
    kind = "DurationExceedsMode"


class TotalPowerExceedsMaxError(ScheduleInputError):
    code = "ERR-4"
    kind = "TotalPowerExceedsMax"


def validate_home_input(payload: HomeInput) -> None:
    """Raise the first ScheduleInputError found, scanning devices in input order."""
    total_energy = 0.0

    for device in payload.devices:
        if device.power > payload.max_power:
            raise PowerExceedsMaxError(
                f"power of device {device.label} exceeds the allowed maximum.",
                device_id=device.id,
            )
        if device.duration > HOURS_PER_DAY:
            raise DurationExceedsDayError(
                f"duration of device {device.label} exceeds {HOURS_PER_DAY} hours.",
                device_id=device.id,
            )
        if device.mode and device.duration > len(MODE_HOURS[device.mode]):
            raise DurationExceedsModeError(
                f"duration of device {device.label} exceeds the hours of its {device.mode} mode.",
                device_id=device.id,
            )
        total_energy += device.power * device.duration

    if total_energy > payload.max_power * HOURS_PER_DAY:
        raise TotalPowerExceedsMaxError("total energy demand of devices exceeds the daily maximum.")
