"""Three built-in landing scenarios on a 20-cell airspace."""

from __future__ import annotations

from sim.entities import Plane

# 1. Normal traffic: fuel priority with shortest-landing tie-break
NORMAL_TRAFFIC: list[Plane] = [
    Plane(1, 0, 5, 4, 3),
    Plane(2, 1, 4, 3, 2),
    Plane(3, 2, 6, 5, 4),
    Plane(4, 3, 1, 2, 1),
    Plane(5, 4, 2, 3, 3),
]

# 2. Emergency: plane 6 declares an emergency on arrival
EMERGENCY_CASE: list[Plane] = [
    Plane(1, 0, 5, 4, 3),
    Plane(2, 1, 4, 3, 2),
    Plane(6, 1, 1, 2, 1, emergency=True),
    Plane(3, 2, 6, 5, 4),
    Plane(5, 4, 1, 3, 3),
]

# 3. Large planes that would exhaust the airspace if held together
DEADLOCK_SCENARIO: list[Plane] = [
    Plane(7, 0, 3, 8, 3),
    Plane(8, 1, 2, 8, 2),
    Plane(9, 2, 1, 5, 2),
]

SCENARIOS: list[list[Plane]] = [NORMAL_TRAFFIC, EMERGENCY_CASE, DEADLOCK_SCENARIO]

SCENARIO_NAMES: list[str] = [
    "Normal Priority Scheduling",
    "Emergency Case Scheduling",
    "Deadlock Prevention Scenario",
]


def get_scenario_name(index: int) -> str:
    if 0 <= index < len(SCENARIO_NAMES):
        return SCENARIO_NAMES[index]
    return f"scenario_{index}"


def lookup_scenario(key: str) -> tuple[str, list[Plane]]:
    """Find a built-in scenario by name (case-insensitive) or 1-based number."""
    if key.isdigit():
        idx = int(key) - 1
        if 0 <= idx < len(SCENARIOS):
            return SCENARIO_NAMES[idx], list(SCENARIOS[idx])
    for i, scenario_name in enumerate(SCENARIO_NAMES):
        if scenario_name.lower() == key.lower():
            return scenario_name, list(SCENARIOS[i])
    raise KeyError(f"unknown scenario {key!r}; choose from {SCENARIO_NAMES}")


def get_scenario(name: str) -> list[Plane]:
    return lookup_scenario(name)[1]


def builtin_scenarios() -> list[tuple[str, list[Plane]]]:
    return [(get_scenario_name(i), list(planes)) for i, planes in enumerate(SCENARIOS)]
