"""Text output: input table, per-step narrative, runway Gantt chart."""

from __future__ import annotations

from sim.entities import Plane
from sim.events import EventType, StepEvent, TimelineEntry
from sim.runner import SimulationResult

BANNER = "=================="


def format_plane_table(planes: list[Plane]) -> str:
    lines = [
        f"{'ID':<6}{'ArrivalTime':<14}{'Fuel':<11}{'Size(Mem)':<13}{'LandingTime':<14}Priority",
        "-" * 60,
    ]
    for p in planes:
        lines.append(
            f"{p.id:<6}{p.arrival_time:<14}{p.fuel_level:<11}{p.size:<13}{p.landing_time:<14}{p.priority_label}"
        )
    return "\n".join(lines)


def format_event(event: StepEvent) -> list[str]:
    """Narrative lines for one step, in the order they happened."""
    if event.event_type == EventType.IDLE:
        return [f"Time {event.time}: No planes to schedule"]

    lines = [f"Time {event.time}: Scheduling Plane {event.plane_id}"]
    if event.event_type == EventType.DELAYED_UNSAFE:
        lines.append(
            f"Unsafe to allocate memory to Plane {event.plane_id}. Potential deadlock! Delaying."
        )
    elif event.event_type == EventType.DELAYED_NO_SPACE:
        lines.append(f"No space in airspace for Plane {event.plane_id}. Delayed.")
    else:
        lines.append(f"Plane {event.plane_id} is landing.")
        if event.airspace:
            lines.append(f"Airspace: {event.airspace}")
    return lines


def format_gantt(timeline: list[TimelineEntry]) -> str:
    lines = [
        f"\n{BANNER} Gantt Chart (Runway Usage) {BANNER}",
        f"{'Step':<10}{'Plane ID':<12}{'Start Time':<16}End Time",
        "-" * 50,
    ]
    for e in timeline:
        lines.append(f"{e.step:<10}{e.plane_id:<12}{e.start_time:<16}{e.end_time}")
    lines.append("=" * 50)
    return "\n".join(lines)


def format_header(name: str) -> str:
    return f"\n{BANNER} Simulation: {name} {BANNER}"


def format_report(result: SimulationResult) -> str:
    """Whole run as one block: header, table, narrative, chart."""
    parts = [format_header(result.name), format_plane_table(result.planes), ""]
    for ev in result.events:
        parts.extend(format_event(ev))
    parts.append(format_gantt(result.timeline))
    parts.append("Simulation complete.")
    return "\n".join(parts)
