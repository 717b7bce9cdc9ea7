"""Per-run metrics: waits, delays, runway utilization."""

from __future__ import annotations

from typing import Any

import numpy as np

from sim.events import EventType
from sim.runner import SimulationResult


def wait_times(result: SimulationResult) -> dict[int, int]:
    """Plane id -> logical time between arrival and landing commit."""
    arrivals = {p.id: p.arrival_time for p in result.planes}
    return {e.plane_id: e.committed_at - arrivals[e.plane_id] for e in result.timeline}


def compute_run_metrics(result: SimulationResult) -> dict[str, Any]:
    landing = {p.id: p.landing_time for p in result.planes}
    waits = wait_times(result)
    wait_vals = list(waits.values())
    turnaround = [waits[pid] + landing[pid] for pid in waits]
    busy = sum(e.duration for e in result.timeline)

    return {
        "name": result.name,
        "capacity": result.capacity,
        "planes_total": len(result.planes),
        "planes_landed": len(result.timeline),
        "makespan": result.end_time,
        "idle_steps": len(result.events_of(EventType.IDLE)),
        "unsafe_delays": len(result.events_of(EventType.DELAYED_UNSAFE)),
        "no_space_delays": len(result.events_of(EventType.DELAYED_NO_SPACE)),
        "mean_wait": float(np.mean(wait_vals)) if wait_vals else 0.0,
        "max_wait": int(np.max(wait_vals)) if wait_vals else 0,
        "mean_turnaround": float(np.mean(turnaround)) if turnaround else 0.0,
        "runway_utilization": busy / result.end_time if result.end_time > 0 else 0.0,
        "landing_order": " ".join(str(pid) for pid in result.landing_order),
    }


def aggregate_metrics(metrics_list: list[dict[str, Any]]) -> dict[str, float]:
    """Mean of every numeric metric across runs."""
    if not metrics_list:
        return {}
    means: dict[str, float] = {}
    for k, v in metrics_list[0].items():
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            means[k] = float(np.mean([m.get(k, 0) for m in metrics_list]))
    return means
