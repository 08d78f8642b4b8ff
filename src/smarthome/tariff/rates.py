from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from smarthome.io.schema import RateBand
from smarthome.planning.calendar import HOURS_PER_DAY


@dataclass(frozen=True)
class NormalizedRate:
    """Tariff value with the explicit hours it applies to.

    `hours` keeps expansion order and may contain duplicates when several bands
    with the same value overlap.
    """
    value: float
    hours: Tuple[int, ...]


def expand_band_hours(band: RateBand) -> List[int]:
    """Expand [from, to) into explicit hours, wrapping past midnight when to <= from."""
    end = band.to_hour if band.from_hour < band.to_hour else band.to_hour + HOURS_PER_DAY
    return [hour % HOURS_PER_DAY for hour in range(band.from_hour, end)]


def normalize_rates(bands: Sequence[RateBand]) -> List[NormalizedRate]:
    """Group band hours by value, keeping first-seen order of distinct values.

    Bands sharing a value are merged by appending hours; the input bands are
    left untouched.
    """
    hours_by_value: Dict[float, List[int]] = {}
    for band in bands:
        hours_by_value.setdefault(band.value, []).extend(expand_band_hours(band))
    return [NormalizedRate(value=v, hours=tuple(h)) for v, h in hours_by_value.items()]


def sort_rates_by_value(rates: Sequence[NormalizedRate]) -> List[NormalizedRate]:
    """Cheapest first."""
    return sorted(rates, key=lambda r: r.value)
