"""Post-hoc views of a computed schedule.

The allocator never reports unplaced hours; these helpers let callers compare
each device's assigned hours against its requested duration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd

from smarthome.planning.calendar import ALL_HOURS, HOURS_PER_DAY
from smarthome.planning.scheduler import ScheduleResult, SmartHome


@dataclass(frozen=True)
class ScheduleSummary:
    peak_load_w: float
    mean_load_w: float
    utilisation: float
    total_cost: float
    unfulfilled: List[str]


def hourly_load_profile(home: SmartHome, result: ScheduleResult) -> np.ndarray:
    """Summed device power per hour (W), indexed by hour."""
    profile = np.zeros(HOURS_PER_DAY, dtype=float)
    for hour, ids in result.schedule.items():
        profile[hour] = sum(home.device_power(device_id) for device_id in ids)
    return profile


def hourly_frame(home: SmartHome, result: ScheduleResult) -> pd.DataFrame:
    profile = hourly_load_profile(home, result)
    rows = []
    for hour in ALL_HOURS:
        ids = result.schedule.get(hour, [])
        rows.append(
            {
                "hour": hour,
                "device_ids": ";".join(ids),
                "device_count": len(ids),
                "load_w": float(profile[hour]),
                "headroom_w": float(home.max_power - profile[hour]),
            }
        )
    return pd.DataFrame(rows)


def fulfilment_frame(home: SmartHome, result: ScheduleResult) -> pd.DataFrame:
    """One row per device (power-desc order): requested vs assigned hours and cost."""
    rows = []
    for device in home.devices:
        assigned = len(result.assigned_hours(device.id))
        rows.append(
            {
                "device_id": device.id,
                "power_w": device.power,
                "duration_h": device.duration,
                "assigned_h": assigned,
                "missing_h": device.duration - assigned,
                "cost": result.consumed_energy.per_device.get(device.id, 0.0),
            }
        )
    return pd.DataFrame(
        rows, columns=["device_id", "power_w", "duration_h", "assigned_h", "missing_h", "cost"]
    )


def unfulfilled_devices(home: SmartHome, result: ScheduleResult) -> List[str]:
    df = fulfilment_frame(home, result)
    return df.loc[df["missing_h"] > 0, "device_id"].tolist()


def summarize_schedule(home: SmartHome, result: ScheduleResult) -> ScheduleSummary:
    profile = hourly_load_profile(home, result)
    capacity_wh = home.max_power * HOURS_PER_DAY
    utilisation = float(profile.sum() / capacity_wh) if capacity_wh > 0 else 0.0
    return ScheduleSummary(
        peak_load_w=float(profile.max()),
        mean_load_w=float(profile.mean()),
        utilisation=utilisation,
        total_cost=result.consumed_energy.total,
        unfulfilled=unfulfilled_devices(home, result),
    )
