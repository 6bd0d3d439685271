"""Run summary metrics."""

from __future__ import annotations

from commit_pattern.schema import RunSummary


def compute_metrics(summary: RunSummary) -> dict:
    """Compute fill rate, events per active day and skip rate."""

    return {
        "total_events": summary.total_events,
        "active_days": summary.active_days,
        "total_days": summary.total_days,
        "skipped_events": summary.skipped_events,
        "active_day_pct": (summary.active_days / summary.total_days * 100.0) if summary.total_days else 0.0,
        "avg_events_per_active_day": summary.total_events / summary.active_days if summary.active_days else 0.0,
        "skip_rate": summary.skipped_events / summary.planned_events if summary.planned_events else 0.0,
    }
