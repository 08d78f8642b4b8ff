from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from smarthome.metrics.summary import hourly_frame
from smarthome.planning.scheduler import ScheduleResult, SmartHome


@dataclass
class ScheduleLogger:
    out_dir: Path

    def __post_init__(self) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)

    def flush(self, home: SmartHome, result: ScheduleResult, prefix: str) -> Dict[str, str]:
        """Write the schedule JSON and an hourly load CSV. Returns file paths."""
        schedule_path = self.out_dir / f"{prefix}_schedule.json"
        hourly_path = self.out_dir / f"{prefix}_hourly.csv"

        with schedule_path.open("w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)

        hourly_frame(home, result).to_csv(hourly_path, index=False)
        return {"schedule_json": str(schedule_path), "hourly_csv": str(hourly_path)}
