"""Simulator entities: Plane and its lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Priority labels (display only; ordering uses priority_key)
PRIORITY_EMERGENCY = "Emergency"
PRIORITY_HIGH = "High"
PRIORITY_NORMAL = "Normal"

# Fuel at or below this is shown as high priority in the input table
HIGH_PRIORITY_FUEL = 2

# Plane states
STATE_UNRELEASED = "unreleased"
STATE_READY = "ready"
STATE_LANDED = "landed"


class PlaneState(str, Enum):
    UNRELEASED = STATE_UNRELEASED
    READY = STATE_READY
    LANDED = STATE_LANDED


@dataclass(frozen=True)
class Plane:
    """A plane waiting for a landing slot.

    fuel_level is the urgency: lower means more urgent. size is the number of
    contiguous airspace cells the plane occupies while landing, and
    landing_time is how long it holds them.
    """

    id: int
    arrival_time: int
    fuel_level: int
    size: int
    landing_time: int
    emergency: bool = False

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Plane {self.id}: size must be positive, got {self.size}")
        if self.landing_time < 0:
            raise ValueError(
                f"Plane {self.id}: landing_time must be >= 0, got {self.landing_time}"
            )
        if self.arrival_time < 0:
            raise ValueError(
                f"Plane {self.id}: arrival_time must be >= 0, got {self.arrival_time}"
            )

    @property
    def priority_label(self) -> str:
        if self.emergency:
            return PRIORITY_EMERGENCY
        if self.fuel_level <= HIGH_PRIORITY_FUEL:
            return PRIORITY_HIGH
        return PRIORITY_NORMAL

    def priority_key(self) -> tuple[bool, int, int]:
        """Sort key: emergencies first, then lowest fuel, then shortest landing."""
        return (not self.emergency, self.fuel_level, self.landing_time)
