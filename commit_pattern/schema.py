"""Core data schema for activity patterns."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Optional


@dataclass(frozen=True)
class DateRange:
    """Closed calendar range, both ends inclusive."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")

    @property
    def total_days(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        """Yield each day from start to end in chronological order."""

        for offset in range(self.total_days):
            yield self.start + timedelta(days=offset)


@dataclass
class ActivityDay:
    """Per-day activity decision."""

    date: date
    is_active: bool
    event_count: int


@dataclass
class Event:
    """A single timestamped change against one target file."""

    timestamp: datetime
    target_file: str
    annotation_text: str


@dataclass
class RunSummary:
    """Totals accumulated across a generator run."""

    total_events: int = 0
    active_days: int = 0
    total_days: int = 0
    skipped_events: int = 0
    planned_events: int = 0


@dataclass
class PatternProfile:
    """Target and annotation sets, with optional range and probability overrides."""

    targets: list[str]
    annotations: list[str]
    date_range: Optional[DateRange] = None
    probability: Optional[float] = None
