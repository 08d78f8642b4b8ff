"""Tariff normalization: raw rate bands to explicit per-value hour sets."""

from .rates import (
    NormalizedRate,
    expand_band_hours,
    normalize_rates,
    sort_rates_by_value,
)

__all__ = [
    "NormalizedRate",
    "expand_band_hours",
    "normalize_rates",
    "sort_rates_by_value",
]
