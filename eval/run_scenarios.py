"""Run scenarios from config and save metrics, timelines and events."""

from __future__ import annotations

import csv
import json
import re
from pathlib import Path
from typing import Any, Callable

import yaml

from eval.metrics import compute_run_metrics
from scenarios.definitions import builtin_scenarios
from scenarios.models import parse_scenarios
from sim.entities import Plane
from sim.events import StepEvent
from sim.pacing import (
    DEFAULT_LANDING_PAUSE,
    DEFAULT_WEATHER_PAUSE,
    DEFAULT_WEATHER_PROBABILITY,
    NullPacer,
    Pacer,
    WallClockPacer,
    WeatherDelay,
)
from sim.runner import SimulationResult, run_simulation


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load config YAML; flatten sim, pacing, output and scenarios into params."""
    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _default_params()
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    return config_to_params(cfg)


def _default_params() -> dict[str, Any]:
    return {
        "capacity": 20,
        "max_time": None,
        "pacing": {
            "enabled": False,
            "landing_pause_s": DEFAULT_LANDING_PAUSE,
            "weather_probability": DEFAULT_WEATHER_PROBABILITY,
            "weather_pause_s": DEFAULT_WEATHER_PAUSE,
            "seed": 0,
        },
        "results_dir": "results",
        "plots": False,
        "scenarios": [],
    }


def config_to_params(cfg: dict[str, Any]) -> dict[str, Any]:
    """Flatten config into params dict for run_scenarios."""
    defaults = _default_params()
    sim = cfg.get("sim") or {}
    pacing = cfg.get("pacing") or {}
    output = cfg.get("output") or {}
    return {
        "capacity": sim.get("capacity", defaults["capacity"]),
        "max_time": sim.get("max_time", defaults["max_time"]),
        "pacing": defaults["pacing"] | pacing,
        "results_dir": output.get("results_dir", defaults["results_dir"]),
        "plots": output.get("plots", defaults["plots"]),
        "scenarios": cfg.get("scenarios") or [],
    }


def resolve_scenarios(params: dict[str, Any]) -> list[tuple[str, list[Plane]]]:
    """Scenarios listed in config, or the built-in three when none are."""
    configured = parse_scenarios(params.get("scenarios"))
    return configured or builtin_scenarios()


def build_pacing(
    params: dict[str, Any],
    announce: Callable[[str], None] | None = None,
) -> tuple[Pacer, WeatherDelay | None]:
    pacing = params.get("pacing", {})
    if not pacing.get("enabled", False):
        return NullPacer(), None
    pacer = WallClockPacer()
    weather = WeatherDelay(
        probability=pacing.get("weather_probability", DEFAULT_WEATHER_PROBABILITY),
        pause_seconds=pacing.get("weather_pause_s", DEFAULT_WEATHER_PAUSE),
        pacer=pacer,
        seed=pacing.get("seed"),
        announce=announce,
    )
    return pacer, weather


def run_scenarios(
    scenarios: list[tuple[str, list[Plane]]],
    params: dict[str, Any],
    pacer: Pacer | None = None,
    weather: WeatherDelay | None = None,
    on_event: Callable[[StepEvent], None] | None = None,
) -> list[SimulationResult]:
    """Run each scenario on a fresh airspace."""
    landing_pause = params.get("pacing", {}).get("landing_pause_s", DEFAULT_LANDING_PAUSE)
    results: list[SimulationResult] = []
    for name, planes in scenarios:
        results.append(
            run_simulation(
                planes,
                capacity=params.get("capacity", 20),
                name=name,
                pacer=pacer,
                weather=weather,
                on_event=on_event,
                landing_pause=landing_pause,
                max_time=params.get("max_time"),
            )
        )
    return results


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_") or "scenario"


def save_results(results: list[SimulationResult], results_dir: str | Path) -> Path:
    """Write scenario_results.csv plus one timeline CSV and one events JSON per run."""
    results_dir = Path(results_dir)
    (results_dir / "timelines").mkdir(parents=True, exist_ok=True)
    (results_dir / "events").mkdir(parents=True, exist_ok=True)

    rows = [compute_run_metrics(r) for r in results]
    for r in results:
        slug = slugify(r.name)
        with open(results_dir / "timelines" / f"{slug}.csv", "w", newline="") as f:
            w = csv.DictWriter(
                f, fieldnames=["step", "plane_id", "start_time", "end_time", "committed_at"]
            )
            w.writeheader()
            w.writerows(e.to_dict() for e in r.timeline)
        with open(results_dir / "events" / f"{slug}.json", "w") as f:
            json.dump(
                {
                    "name": r.name,
                    "capacity": r.capacity,
                    "end_time": r.end_time,
                    "events": [ev.to_dict() for ev in r.events],
                },
                f,
                indent=2,
            )

    out_csv = results_dir / "scenario_results.csv"
    if rows:
        with open(out_csv, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            w.writeheader()
            w.writerows(rows)
    return out_csv


def main(
    config_path: str | Path | None = None,
    results_dir: str | Path | None = None,
) -> list[SimulationResult]:
    params = load_config(config_path)
    results = run_scenarios(resolve_scenarios(params), params)
    out_csv = save_results(results, results_dir or params["results_dir"])
    print(f"Wrote {out_csv} with {len(results)} scenarios.")
    return results


if __name__ == "__main__":
    import argparse
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default=None)
    p.add_argument("--results_dir", type=str, default=None)
    args = p.parse_args()
    main(config_path=args.config, results_dir=args.results_dir)
