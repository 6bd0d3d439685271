"""Activity day and event draws."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterator, Sequence

from commit_pattern.random_source import RandomProvider
from commit_pattern.schema import ActivityDay, DateRange, Event

BUSINESS_HOURS = (9, 18)


def validate_parameters(
    probability: float,
    events_per_day: tuple[int, int],
    targets: Sequence[str],
    annotations: Sequence[str],
) -> None:
    """Reject generator parameters that cannot produce a valid pattern."""

    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1], got {probability}")
    low, high = events_per_day
    if low < 1 or high < low:
        raise ValueError(f"invalid events-per-day range {events_per_day}")
    if not targets:
        raise ValueError("target set is empty")
    if not annotations:
        raise ValueError("annotation set is empty")


def draw_day(day: date, rng: RandomProvider, probability: float, events_per_day: tuple[int, int]) -> ActivityDay:
    """Decide whether a day is active and how many events it gets."""

    if rng.random() >= probability:
        return ActivityDay(date=day, is_active=False, event_count=0)
    low, high = events_per_day
    return ActivityDay(date=day, is_active=True, event_count=rng.integer(low, high))


def draw_event(day: date, rng: RandomProvider, targets: Sequence[str], annotations: Sequence[str]) -> Event:
    """Draw one event inside business hours of ``day``."""

    start_hour, end_hour = BUSINESS_HOURS
    hour = rng.integer(start_hour, end_hour)
    minute = rng.integer(0, 59)
    second = rng.integer(0, 59)
    return Event(
        timestamp=datetime.combine(day, time(hour, minute, second)),
        target_file=rng.choice(targets),
        annotation_text=rng.choice(annotations),
    )


def plan_days(
    date_range: DateRange,
    rng: RandomProvider,
    probability: float,
    events_per_day: tuple[int, int] = (1, 6),
) -> Iterator[ActivityDay]:
    for day in date_range.days():
        yield draw_day(day, rng, probability, events_per_day)


def plan_events(
    date_range: DateRange,
    rng: RandomProvider,
    targets: Sequence[str],
    annotations: Sequence[str],
    probability: float,
    events_per_day: tuple[int, int] = (1, 6),
) -> Iterator[Event]:
    """Yield the full event schedule for a range without dispatching anything."""

    validate_parameters(probability, events_per_day, targets, annotations)
    for activity in plan_days(date_range, rng, probability, events_per_day):
        for _ in range(activity.event_count):
            yield draw_event(activity.date, rng, targets, annotations)
