"""Demo script for commit-pattern: plan a short range without touching git."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from commit_pattern import defaults
from commit_pattern.random_source import RandomProvider
from commit_pattern.scheduling import plan_events
from commit_pattern.schema import DateRange


def main() -> None:
    date_range = DateRange(date(2025, 5, 4), date(2025, 5, 10))
    events = plan_events(
        date_range,
        RandomProvider(seed=7),
        defaults.TARGETS,
        defaults.ANNOTATIONS,
        defaults.ACTIVITY_PROBABILITY,
    )
    for event in events:
        print(event.timestamp.isoformat(), event.target_file, event.annotation_text)


if __name__ == "__main__":
    main()
