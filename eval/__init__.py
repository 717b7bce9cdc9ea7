"""Evaluation: run scenarios, metrics, text report, plots."""

from eval.metrics import aggregate_metrics, compute_run_metrics, wait_times
from eval.report import format_event, format_gantt, format_plane_table, format_report

__all__ = [
    "aggregate_metrics",
    "compute_run_metrics",
    "wait_times",
    "format_event",
    "format_gantt",
    "format_plane_table",
    "format_report",
]
