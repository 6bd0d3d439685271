from datetime import date, datetime

import pytest

from commit_pattern import defaults
from commit_pattern.random_source import RandomProvider
from commit_pattern.scheduling import draw_day, draw_event, plan_days, plan_events
from commit_pattern.schema import DateRange


class ScriptedRandom:
    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self):
        return self.floats.pop(0)

    def integer(self, low, high):
        value = self.ints.pop(0)
        assert low <= value <= high
        return value

    def choice(self, items):
        return items[self.integer(0, len(items) - 1)]


def test_draw_event_exact():
    rng = ScriptedRandom(ints=[10, 30, 45, 2, 5])
    event = draw_event(date(2025, 5, 4), rng, defaults.TARGETS, defaults.ANNOTATIONS)
    assert event.timestamp == datetime(2025, 5, 4, 10, 30, 45)
    assert event.target_file == defaults.TARGETS[2]
    assert event.annotation_text == defaults.ANNOTATIONS[5]


def test_draw_day_threshold():
    inactive = draw_day(date(2025, 5, 4), ScriptedRandom(floats=[0.7]), 0.7, (1, 6))
    assert not inactive.is_active
    assert inactive.event_count == 0

    active = draw_day(date(2025, 5, 4), ScriptedRandom(floats=[0.69], ints=[4]), 0.7, (1, 6))
    assert active.is_active
    assert active.event_count == 4


def test_two_day_scenario():
    date_range = DateRange(date(2025, 5, 4), date(2025, 5, 5))
    rng = RandomProvider(seed=11)
    days = list(plan_days(date_range, rng, 0.70))
    assert [d.date for d in days] == [date(2025, 5, 4), date(2025, 5, 5)]

    events = list(plan_events(date_range, RandomProvider(seed=11), defaults.TARGETS, defaults.ANNOTATIONS, 0.70))
    assert len(events) <= 12
    assert all(e.target_file in defaults.TARGETS for e in events)
    if all(d.is_active for d in days):
        assert 2 <= len(events) <= 12


def test_long_range_invariants():
    date_range = DateRange(date(2020, 1, 1), date(2025, 6, 30))
    days = list(plan_days(date_range, RandomProvider(seed=5), 0.70))
    assert len(days) == date_range.total_days
    assert all(1 <= d.event_count <= 6 for d in days if d.is_active)
    assert all(d.event_count == 0 for d in days if not d.is_active)

    active_fraction = sum(d.is_active for d in days) / len(days)
    assert abs(active_fraction - 0.70) < 0.05

    events = list(plan_events(date_range, RandomProvider(seed=5), defaults.TARGETS, defaults.ANNOTATIONS, 0.70))
    for event in events:
        assert 9 <= event.timestamp.hour <= 18
        assert 0 <= event.timestamp.minute <= 59
        assert 0 <= event.timestamp.second <= 59
    assert [e.timestamp.date() for e in events] == sorted(e.timestamp.date() for e in events)


def test_different_seeds_differ():
    date_range = DateRange(date(2025, 5, 4), date(2025, 6, 7))
    a = list(plan_events(date_range, RandomProvider(seed=1), defaults.TARGETS, defaults.ANNOTATIONS, 0.70))
    b = list(plan_events(date_range, RandomProvider(seed=2), defaults.TARGETS, defaults.ANNOTATIONS, 0.70))
    assert a != b


@pytest.mark.parametrize(
    "probability, events_per_day, targets, annotations",
    [
        (1.5, (1, 6), ["a"], ["x"]),
        (0.5, (0, 6), ["a"], ["x"]),
        (0.5, (4, 2), ["a"], ["x"]),
        (0.5, (1, 6), [], ["x"]),
        (0.5, (1, 6), ["a"], []),
    ],
)
def test_invalid_parameters(probability, events_per_day, targets, annotations):
    date_range = DateRange(date(2025, 5, 4), date(2025, 5, 5))
    with pytest.raises(ValueError):
        list(plan_events(date_range, RandomProvider(seed=0), targets, annotations, probability, events_per_day))
