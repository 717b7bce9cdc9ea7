"""Simulation loop: admit arrivals, pick by priority, gate on airspace safety, land."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from sim.airspace import DEFAULT_CAPACITY, Airspace
from sim.entities import Plane, PlaneState
from sim.events import EventType, StepEvent, TimelineEntry
from sim.pacing import DEFAULT_LANDING_PAUSE, NullPacer, Pacer, WeatherDelay
from sim.scheduler import Scheduler


@dataclass
class SimulationResult:
    """Everything one run produced, in order."""

    name: str
    capacity: int
    planes: list[Plane]
    events: list[StepEvent] = field(default_factory=list)
    timeline: list[TimelineEntry] = field(default_factory=list)
    states: dict[int, PlaneState] = field(default_factory=dict)
    end_time: int = 0

    @property
    def landing_order(self) -> list[int]:
        return [entry.plane_id for entry in self.timeline]

    def events_of(self, event_type: EventType) -> list[StepEvent]:
        return [ev for ev in self.events if ev.event_type == event_type]

    def delays_for(self, plane_id: int) -> int:
        return sum(1 for ev in self.events if ev.is_delay and ev.plane_id == plane_id)

    def waiting(self) -> list[int]:
        return [pid for pid, st in self.states.items() if st != PlaneState.LANDED]


class SimulationStalledError(RuntimeError):
    """Logical clock passed max_time with planes still waiting."""

    def __init__(self, message: str, result: SimulationResult):
        super().__init__(message)
        self.result = result


def _check_unique_ids(planes: list[Plane]) -> None:
    seen: set[int] = set()
    for p in planes:
        if p.id in seen:
            raise ValueError(f"duplicate plane id {p.id}")
        seen.add(p.id)


def run_simulation(
    planes: Iterable[Plane],
    capacity: int = DEFAULT_CAPACITY,
    name: str = "",
    airspace: Airspace | None = None,
    pacer: Pacer | None = None,
    weather: WeatherDelay | None = None,
    on_event: Callable[[StepEvent], None] | None = None,
    landing_pause: float = DEFAULT_LANDING_PAUSE,
    max_time: int | None = None,
) -> SimulationResult:
    """
    Run the landing loop until every plane has landed.

    One plane holds the airspace at a time: the clock jumps over the whole
    landing before its cells are released, so the next allocation always
    sees the released range. Delayed planes go back to the ready set and are
    retried at the next time unit with no backoff. With max_time=None a
    plane that can never fit is retried forever.

    A passed-in airspace takes precedence over capacity; a non-default
    capacity that disagrees with it raises ValueError.
    """
    planes = list(planes)
    _check_unique_ids(planes)
    incoming = sorted(planes, key=lambda p: (p.arrival_time, p.id))
    if airspace is None:
        airspace = Airspace(capacity)
    elif capacity != DEFAULT_CAPACITY and capacity != airspace.capacity:
        raise ValueError(
            f"capacity {capacity} does not match airspace capacity {airspace.capacity}"
        )
    pacer = pacer or NullPacer()
    scheduler = Scheduler()
    result = SimulationResult(name=name, capacity=airspace.capacity, planes=planes)
    result.states = {p.id: PlaneState.UNRELEASED for p in planes}
    time = 0
    chart_time = 0

    def emit(ev: StepEvent) -> None:
        result.events.append(ev)
        if on_event is not None:
            on_event(ev)

    while incoming or len(scheduler):
        if max_time is not None and time > max_time:
            result.end_time = time
            raise SimulationStalledError(
                f"{len(incoming) + len(scheduler)} plane(s) still waiting at time {time}",
                result,
            )
        if weather is not None:
            weather.maybe_delay()

        # Admit arrivals (ascending id within the same arrival time)
        while incoming and incoming[0].arrival_time <= time:
            plane = incoming.pop(0)
            scheduler.add_plane(plane)
            result.states[plane.id] = PlaneState.READY

        current = scheduler.get_next_plane()
        if current is None:
            emit(StepEvent(time, EventType.IDLE, free_cells=airspace.free_count))
            time += 1
            continue

        if not airspace.is_safe(current.size):
            emit(
                StepEvent(
                    time,
                    EventType.DELAYED_UNSAFE,
                    plane_id=current.id,
                    free_cells=airspace.free_count,
                )
            )
            scheduler.add_plane(current)
            time += 1
            continue

        free_before = airspace.free_count
        offset = airspace.allocate(current.size)
        if offset is None:
            emit(
                StepEvent(
                    time,
                    EventType.DELAYED_NO_SPACE,
                    plane_id=current.id,
                    free_cells=free_before,
                )
            )
            scheduler.add_plane(current)
            time += 1
            continue

        result.timeline.append(
            TimelineEntry(
                step=len(result.timeline) + 1,
                plane_id=current.id,
                start_time=chart_time,
                end_time=chart_time + current.landing_time,
                committed_at=time,
            )
        )
        chart_time += current.landing_time
        result.states[current.id] = PlaneState.LANDED
        emit(
            StepEvent(
                time,
                EventType.SCHEDULED,
                plane_id=current.id,
                offset=offset,
                free_cells=free_before,
                airspace=airspace.render(),
            )
        )
        pacer.pause(landing_pause)
        time += current.landing_time
        airspace.deallocate(offset, current.size)

    result.end_time = time
    return result
