"""Hour calendar for a single day.

Day hours are [DAY_START, DAY_END); night hours are the rest of the day in
rotated order starting at DAY_END (21, 22, 23, 0, ..., 6), so iteration over
night hours runs through midnight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

HOURS_PER_DAY = 24
DAY_START = 7
DAY_END = 21


@dataclass(frozen=True)
class HourCalendar:
    all_hours: Tuple[int, ...]
    day_hours: Tuple[int, ...]
    night_hours: Tuple[int, ...]

    @property
    def mode_hours(self) -> Dict[str, Tuple[int, ...]]:
        return {"day": self.day_hours, "night": self.night_hours}

    def hours_for_mode(self, mode: Optional[str]) -> Tuple[int, ...]:
        """Permitted hours for a device mode; no mode means the whole day."""
        if mode is None:
            return self.all_hours
        return self.mode_hours[mode]


def build_hour_calendar(day_start: int = DAY_START, day_end: int = DAY_END) -> HourCalendar:
    all_hours = tuple(range(HOURS_PER_DAY))
    day_hours = all_hours[day_start:day_end]
    night_hours = all_hours[day_end:] + all_hours[:day_start]
    return HourCalendar(all_hours=all_hours, day_hours=day_hours, night_hours=night_hours)


CALENDAR = build_hour_calendar()

ALL_HOURS = CALENDAR.all_hours
DAY_HOURS = CALENDAR.day_hours
NIGHT_HOURS = CALENDAR.night_hours
MODE_HOURS = CALENDAR.mode_hours


def hours_for_mode(mode: Optional[str]) -> Tuple[int, ...]:
    return CALENDAR.hours_for_mode(mode)
