"""Step events and the runway usage timeline produced by the simulation loop."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class EventType(str, Enum):
    IDLE = "idle"
    DELAYED_UNSAFE = "delayed_unsafe"
    DELAYED_NO_SPACE = "delayed_no_space"
    SCHEDULED = "scheduled"


DELAY_EVENTS = (EventType.DELAYED_UNSAFE, EventType.DELAYED_NO_SPACE)


@dataclass
class StepEvent:
    """Outcome of one loop iteration at logical time `time`."""

    time: int
    event_type: EventType
    plane_id: int | None = None
    offset: int | None = None  # airspace start cell, SCHEDULED only
    free_cells: int | None = None  # free cells when the decision was made
    airspace: str | None = None  # rendered airspace while the plane held it

    @property
    def is_delay(self) -> bool:
        return self.event_type in DELAY_EVENTS

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["event_type"] = self.event_type.value
        return d


@dataclass
class TimelineEntry:
    """
    One committed landing. start_time/end_time accumulate landing times in
    commit order (the runway chart); committed_at is the logical clock value
    when the landing was committed.
    """

    step: int
    plane_id: int
    start_time: int
    end_time: int
    committed_at: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
