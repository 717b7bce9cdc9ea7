"""Input scenarios: built-in definitions and config-file validation."""

from scenarios.definitions import (
    SCENARIOS,
    SCENARIO_NAMES,
    builtin_scenarios,
    get_scenario,
    get_scenario_name,
    lookup_scenario,
)
from scenarios.models import PlaneModel, ScenarioModel, parse_scenarios, scenario_json_schema

__all__ = [
    "SCENARIOS",
    "SCENARIO_NAMES",
    "builtin_scenarios",
    "get_scenario",
    "get_scenario_name",
    "lookup_scenario",
    "PlaneModel",
    "ScenarioModel",
    "parse_scenarios",
    "scenario_json_schema",
]
