from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

# Accumulation happens in W x rate units; reported costs are per kW.
KILO = 1000.0


@dataclass(frozen=True)
class ConsumedEnergy:
    """Total and per-device cost of a schedule, in kilo units."""
    total: float = 0.0
    per_device: Dict[str, float] = field(default_factory=dict)


@dataclass
class ConsumedEnergyTracker:
    total: float = 0.0
    per_device: Dict[str, float] = field(default_factory=dict)
    finalized: bool = False

    def _check_open(self) -> None:
        if self.finalized:
            raise RuntimeError("ConsumedEnergyTracker already finalized")

    def reset_device(self, device_id: str) -> None:
        self._check_open()
        self.per_device[device_id] = 0.0

    def add(self, device_id: str, cost: float) -> None:
        self._check_open()
        self.total += cost
        self.per_device[device_id] = self.per_device.get(device_id, 0.0) + cost

    def finalize(self) -> ConsumedEnergy:
        """Convert accumulated costs to kilo scale. Applied at most once."""
        if not self.finalized:
            self.total /= KILO
            for device_id in self.per_device:
                self.per_device[device_id] /= KILO
            self.finalized = True
        return ConsumedEnergy(total=self.total, per_device=dict(self.per_device))
