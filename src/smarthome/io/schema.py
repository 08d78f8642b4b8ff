from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DeviceMode = Literal["day", "night"]


class Device(BaseModel):
    """A schedulable appliance. Immutable once accepted."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    power: float = Field(gt=0, description="Rated power draw (W)")
    # Upper bound (24 h) is enforced by the input validator, not here
    duration: int = Field(ge=0, description="Required run time (hours)")
    mode: Optional[DeviceMode] = Field(
        default=None,
        description="Restrict operation to day (07:00-21:00) or night hours.",
    )

    @property
    def label(self) -> str:
        return self.name or self.id


class RateBand(BaseModel):
    """Raw tariff band. `to` <= `from` means the band wraps past midnight."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    value: float = Field(description="Cost per watt-hour-equivalent")
    from_hour: int = Field(alias="from")
    to_hour: int = Field(alias="to")


class HomeInput(BaseModel):
    """Parsed scheduling payload: `{devices, rates, maxPower}`."""
    model_config = ConfigDict(populate_by_name=True)

    devices: List[Device] = Field(default_factory=list)
    rates: List[RateBand] = Field(default_factory=list)
    max_power: float = Field(alias="maxPower", ge=0, description="Household power ceiling (W)")
