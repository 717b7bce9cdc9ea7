"""Discrete-time simulator for landing-slot scheduling over a shared airspace."""

from sim.airspace import Airspace, OutOfRangeError
from sim.entities import Plane, PlaneState
from sim.events import EventType, StepEvent, TimelineEntry
from sim.pacing import NullPacer, Pacer, WallClockPacer, WeatherDelay
from sim.runner import SimulationResult, SimulationStalledError, run_simulation
from sim.scheduler import Scheduler

__all__ = [
    "Airspace",
    "OutOfRangeError",
    "Plane",
    "PlaneState",
    "Scheduler",
    "EventType",
    "StepEvent",
    "TimelineEntry",
    "Pacer",
    "NullPacer",
    "WallClockPacer",
    "WeatherDelay",
    "SimulationResult",
    "SimulationStalledError",
    "run_simulation",
]
