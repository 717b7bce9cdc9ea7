"""Generate figures: runway Gantt charts and wait-time bars."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


def plot_gantt(
    csv_path: str | Path,
    output_path: str | Path | None = None,
    title: str | None = None,
) -> Path:
    """Horizontal bars per landing from a timeline CSV (step, plane_id, start_time, end_time)."""
    df = pd.read_csv(csv_path)
    if output_path is None:
        output_path = Path(csv_path).with_suffix(".png")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, max(2, 0.5 * len(df) + 1)))
    for i, row in enumerate(df.itertuples(index=False)):
        ax.broken_barh(
            [(row.start_time, max(row.end_time - row.start_time, 0.1))],
            (i - 0.4, 0.8),
            facecolors="tab:blue",
            alpha=0.8,
        )
        ax.text(row.start_time, i, f"P{row.plane_id}", va="center", ha="left", fontsize=8, color="white")
    ax.set_yticks(range(len(df)))
    ax.set_yticklabels([f"step {s}" for s in df["step"]] if len(df) else [])
    ax.invert_yaxis()
    ax.set_xlabel("Time")
    ax.set_title(title or "Runway usage")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close()
    return output_path


def plot_wait_times(
    csv_path: str | Path,
    output_path: str | Path | None = None,
    metric: str = "mean_wait",
) -> Path:
    """Bar chart of one metric per scenario from scenario_results.csv."""
    df = pd.read_csv(csv_path)
    if output_path is None:
        output_path = Path(csv_path).parent / f"{metric}.png"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if "name" not in df.columns or metric not in df.columns:
        return output_path

    fig, ax = plt.subplots(figsize=(max(6, len(df) * 1.5), 4))
    ax.bar(df["name"].astype(str), df[metric])
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} by scenario")
    plt.xticks(rotation=20, ha="right")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close()
    return output_path


def generate_all_plots(results_dir: str | Path = "results") -> list[Path]:
    """Gantt chart for every saved timeline plus wait bars; returns written paths."""
    results_dir = Path(results_dir)
    written: list[Path] = []
    for timeline_csv in sorted((results_dir / "timelines").glob("*.csv")):
        written.append(
            plot_gantt(timeline_csv, results_dir / "plots" / f"gantt_{timeline_csv.stem}.png")
        )
    summary = results_dir / "scenario_results.csv"
    if summary.exists():
        written.append(plot_wait_times(summary, results_dir / "plots" / "mean_wait.png"))
    return written
