"""Run loop that dispatches planned events to a recorder."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Sequence

from commit_pattern.annotation import append_annotation, commit_message
from commit_pattern.random_source import RandomProvider
from commit_pattern.recorder import Recorder
from commit_pattern.scheduling import draw_event, plan_days, validate_parameters
from commit_pattern.schema import DateRange, Event, RunSummary

logger = logging.getLogger(__name__)

DISPATCH_DELAY_SECONDS = 0.1


def dispatch_event(event: Event, recorder: Recorder, root: Path) -> bool:
    """Annotate the target file and record it. Returns False if the event was skipped."""

    path = root / event.target_file
    if not path.exists():
        logger.warning("Skipping %s: file not found", event.target_file)
        return False

    if not append_annotation(path, event.annotation_text, event.timestamp):
        return False

    recorder.stage(event.target_file)
    recorder.commit_at(commit_message(event.target_file, event.annotation_text), event.timestamp)
    return True


def run_pattern(
    date_range: DateRange,
    recorder: Recorder,
    targets: Sequence[str],
    annotations: Sequence[str],
    rng: RandomProvider | None = None,
    probability: float = 0.70,
    events_per_day: tuple[int, int] = (1, 6),
    root: Path | str = ".",
    delay: float = DISPATCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> RunSummary:
    """Walk the range day by day and dispatch each drawn event in order.

    Recorder failures propagate; missing targets and failed appends are
    counted as skipped.
    """

    validate_parameters(probability, events_per_day, targets, annotations)
    rng = rng if rng is not None else RandomProvider()
    root = Path(root)
    summary = RunSummary(total_days=date_range.total_days)

    logger.info("Creating events between %s and %s (%d days)", date_range.start, date_range.end, date_range.total_days)

    for activity in plan_days(date_range, rng, probability, events_per_day):
        if not activity.is_active:
            logger.info("%s: inactive", activity.date)
            continue

        summary.active_days += 1
        summary.planned_events += activity.event_count
        for _ in range(activity.event_count):
            event = draw_event(activity.date, rng, targets, annotations)
            if delay > 0:
                sleep(delay)
            if dispatch_event(event, recorder, root):
                summary.total_events += 1
                logger.info("  %s - %s", event.timestamp.strftime("%Y-%m-%d %H:%M:%S"), event.target_file)
            else:
                summary.skipped_events += 1

        logger.info("%s: %d events", activity.date, activity.event_count)

    return summary
