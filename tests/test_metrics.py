from commit_pattern.metrics import compute_metrics
from commit_pattern.schema import RunSummary


def test_compute_metrics():
    summary = RunSummary(total_events=18, active_days=6, total_days=10, skipped_events=2, planned_events=20)
    metrics = compute_metrics(summary)
    assert round(metrics["active_day_pct"], 2) == 60.0
    assert round(metrics["avg_events_per_active_day"], 2) == 3.0
    assert round(metrics["skip_rate"], 2) == 0.1


def test_compute_metrics_empty_run():
    metrics = compute_metrics(RunSummary())
    assert metrics["active_day_pct"] == 0.0
    assert metrics["avg_events_per_active_day"] == 0.0
    assert metrics["skip_rate"] == 0.0
