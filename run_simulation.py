#!/usr/bin/env python3
"""
Landing-Slot Simulation Runner
Runs the landing scenarios, prints the narrative and runway chart, saves results.

Usage: python3 run_simulation.py [--options]
"""

import argparse
import json
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from eval.metrics import compute_run_metrics
from eval.plots import generate_all_plots
from eval.report import format_event, format_gantt, format_header, format_plane_table
from eval.run_scenarios import build_pacing, config_to_params, resolve_scenarios, save_results
from scenarios.definitions import lookup_scenario
from sim.entities import Plane
from sim.events import StepEvent
from sim.runner import SimulationResult, SimulationStalledError, run_simulation


class SimulationRunner:
    """Runs every configured scenario with console + file logging."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.results_dir = Path(config["results_dir"])
        self.results_dir.mkdir(parents=True, exist_ok=True)
        (self.results_dir / "logs").mkdir(exist_ok=True)

        self.log_file = (
            self.results_dir
            / "logs"
            / f"simulation_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        self.start_time = time.time()
        self.results: List[SimulationResult] = []
        self.failed: List[str] = []

    def log(self, message: str, level: str = "INFO"):
        """Log message to file and console."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_message = f"[{timestamp}] {level}: {message}"

        print(log_message)

        with open(self.log_file, "a") as f:
            f.write(log_message + "\n")

    def on_event(self, event: StepEvent):
        for line in format_event(event):
            self.log(line)

    def run_scenario(self, name: str, planes: List[Plane]) -> Optional[SimulationResult]:
        print(format_header(name))
        print(format_plane_table(planes))
        print()

        pacer, weather = build_pacing(self.config, announce=lambda m: self.log(m, "WARN"))
        try:
            result = run_simulation(
                planes,
                capacity=self.config["capacity"],
                name=name,
                pacer=pacer,
                weather=weather,
                on_event=self.on_event,
                landing_pause=self.config["pacing"].get("landing_pause_s", 0.2),
                max_time=self.config.get("max_time"),
            )
        except SimulationStalledError as e:
            self.log(f"❌ {name}: {e} (waiting: {e.result.waiting()})", "ERROR")
            self.failed.append(name)
            return None

        print(format_gantt(result.timeline))
        print("Simulation complete.\n")
        metrics = compute_run_metrics(result)
        self.log(
            f"✅ {name}: {metrics['planes_landed']}/{metrics['planes_total']} landed, "
            f"makespan {metrics['makespan']}, mean wait {metrics['mean_wait']:.2f}"
        )
        return result

    def run(self, scenarios: List[tuple]) -> Dict[str, Any]:
        self.log(f"🛬 Running {len(scenarios)} scenario(s) on {self.config['capacity']} airspace cells")
        for name, planes in scenarios:
            result = self.run_scenario(name, planes)
            if result is not None:
                self.results.append(result)

        if self.results:
            out_csv = save_results(self.results, self.results_dir)
            self.log(f"Results saved to {out_csv}")
            if self.config.get("plots"):
                written = generate_all_plots(self.results_dir)
                self.log(f"Wrote {len(written)} plot(s) to {self.results_dir / 'plots'}")

        elapsed = time.time() - self.start_time
        self.log(f"Finished in {elapsed:.1f}s")
        return {
            "completed": [r.name for r in self.results],
            "failed": list(self.failed),
        }


def load_config(config_file: Optional[str]) -> Dict[str, Any]:
    """Load configuration from file or defaults. Supports .json and .yaml/.yml."""
    if config_file and Path(config_file).exists():
        path = Path(config_file)
        with open(config_file, "r") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                import yaml
                raw = yaml.safe_load(f) or {}
            else:
                raw = json.load(f)
    else:
        raw = {}

    return config_to_params(raw)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Landing-Slot Simulation Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in scenarios, no pauses
  python3 run_simulation.py

  # Live pacing with random weather delays
  python3 run_simulation.py --pace --seed 7

  # One built-in scenario by number or name
  python3 run_simulation.py --scenario 2

  # Custom configuration
  python3 run_simulation.py --config config/fragmented.yaml --plots
        """,
    )

    parser.add_argument("--config", type=str, default="config/default.yaml", help="YAML or JSON config file")
    parser.add_argument("--results", type=str, default=None, help="Results directory")
    parser.add_argument(
        "--scenario", action="append", default=None, help="Built-in scenario number or name (repeatable)"
    )
    parser.add_argument("--pace", action="store_true", help="Pause on the wall clock for live viewing")
    parser.add_argument("--seed", type=int, default=None, help="Weather delay seed")
    parser.add_argument("--plots", action="store_true", help="Write Gantt and wait-time plots")
    parser.add_argument("--max-time", type=int, default=None, help="Stop a scenario past this logical time")

    args = parser.parse_args()

    config = load_config(args.config)
    if args.results is not None:
        config["results_dir"] = args.results
    if args.pace:
        config["pacing"]["enabled"] = True
    if args.seed is not None:
        config["pacing"]["seed"] = args.seed
    if args.plots:
        config["plots"] = True
    if args.max_time is not None:
        config["max_time"] = args.max_time

    try:
        if args.scenario:
            scenarios = [lookup_scenario(key) for key in args.scenario]
        else:
            scenarios = resolve_scenarios(config)
    except (KeyError, ValueError) as e:
        print(f"❌ Bad scenario selection: {e}")
        return 2

    runner = SimulationRunner(config)

    try:
        result = runner.run(scenarios)
        return 0 if not result["failed"] else 1
    except KeyboardInterrupt:
        print("\n⏹️  Simulation interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
