"""Greedy day-ahead schedule under a tariff and a household power ceiling.

Devices are placed one at a time, highest power first. Each device walks the
tariff rates from cheapest to most expensive and takes every hour (in calendar
order of its permitted hours) where the ceiling still holds, until its
duration is covered. Earlier placements are never revisited, so the result is
deterministic but not globally optimal. A device that cannot be fully placed
keeps whatever hours it got; no error is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from smarthome.io.schema import Device, HomeInput
from smarthome.metrics.energy import ConsumedEnergy, ConsumedEnergyTracker
from smarthome.planning.calendar import ALL_HOURS, hours_for_mode
from smarthome.tariff.rates import NormalizedRate, normalize_rates, sort_rates_by_value
from smarthome.validation.checks import validate_home_input

LOG = logging.getLogger("smarthome")


@dataclass
class ScheduleResult:
    """Hour -> device ids (assignment order) plus accumulated cost in kilo units."""
    schedule: Dict[int, List[str]]
    consumed_energy: ConsumedEnergy = field(default_factory=ConsumedEnergy)

    def assigned_hours(self, device_id: str) -> List[int]:
        return [hour for hour, ids in self.schedule.items() if device_id in ids]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable dict (hour keys as strings)."""
        return {
            "schedule": {str(hour): list(ids) for hour, ids in self.schedule.items()},
            "consumedEnergy": {
                "value": self.consumed_energy.total,
                "devices": dict(self.consumed_energy.per_device),
            },
        }


def _empty_schedule() -> Dict[int, List[str]]:
    return {hour: [] for hour in ALL_HOURS}


class SmartHome:
    """Validated home configuration and the allocator that schedules it.

    Construction validates the payload, normalizes the tariff and sorts the
    devices by descending power (stable for equal power). Invalid input raises
    a ScheduleInputError and no instance is produced.
    """

    def __init__(self, payload: Union[HomeInput, Mapping[str, Any]]):
        home_input = payload if isinstance(payload, HomeInput) else HomeInput.model_validate(payload)
        validate_home_input(home_input)

        self.devices: List[Device] = sorted(home_input.devices, key=lambda d: d.power, reverse=True)
        self.rates: List[NormalizedRate] = normalize_rates(home_input.rates)
        self.max_power: float = home_input.max_power

        self._catalog: Dict[str, Device] = {}
        for device in self.devices:
            self._catalog.setdefault(device.id, device)

        self.schedule: Dict[int, List[str]] = _empty_schedule()
        self.energy = ConsumedEnergyTracker()

        LOG.info(
            "Home configured: %d devices, %d rates, max power %.0f W",
            len(self.devices), len(self.rates), self.max_power,
        )

    def lookup_device(self, device_id: str) -> Optional[Device]:
        return self._catalog.get(device_id)

    def device_power(self, device_id: str) -> float:
        """Power of a catalogued device; unknown ids count as zero."""
        device = self.lookup_device(device_id)
        return device.power if device is not None else 0.0

    def is_power_enough(self, hour: int, device: Device) -> bool:
        """True if adding `device` to `hour` keeps the slot within max_power."""
        current = sum(self.device_power(device_id) for device_id in self.schedule[hour])
        return self.max_power >= current + device.power

    @staticmethod
    def get_consuming(power: float, value: float) -> float:
        """Cost of running `power` for one hour at tariff `value`."""
        return power * value

    def _reset(self) -> None:
        self.schedule = _empty_schedule()
        self.energy = ConsumedEnergyTracker()

    def _place_device(self, device: Device, rates: List[NormalizedRate]) -> int:
        remaining = device.duration
        permitted = hours_for_mode(device.mode)
        # Overlapping rates can offer the same hour twice; a device runs at most once per hour
        taken = set()
        self.energy.reset_device(device.id)

        for rate in rates:
            if not remaining:
                break
            rate_hours = set(rate.hours)
            candidates = [hour for hour in permitted if hour in rate_hours]
            for hour in candidates:
                if hour in taken:
                    continue
                if remaining and self.is_power_enough(hour, device):
                    self.schedule[hour].append(device.id)
                    taken.add(hour)
                    self.energy.add(device.id, self.get_consuming(device.power, rate.value))
                    remaining -= 1
                    LOG.debug("Placed %s at %02d:00 (rate %s)", device.id, hour, rate.value)
        return remaining

    def compute_schedule(self) -> ScheduleResult:
        """Run the greedy allocation from a clean state and return the result.

        Safe to call repeatedly: each call starts from empty slots and zero
        cost, so the kilo conversion is applied once per call.
        """
        self._reset()
        rates = sort_rates_by_value(self.rates)

        for device in self.devices:
            missing = self._place_device(device, rates)
            if missing:
                LOG.debug("Device %s left with %d of %d hours unplaced", device.id, missing, device.duration)

        return ScheduleResult(
            schedule={hour: list(ids) for hour, ids in self.schedule.items()},
            consumed_energy=self.energy.finalize(),
        )


def compute_schedule(payload: Union[HomeInput, Mapping[str, Any]]) -> ScheduleResult:
    return SmartHome(payload).compute_schedule()
