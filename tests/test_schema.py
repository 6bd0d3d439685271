from datetime import date

import pytest

from commit_pattern.schema import DateRange


def test_date_range_visits_each_day_in_order():
    date_range = DateRange(date(2025, 5, 30), date(2025, 6, 2))
    days = list(date_range.days())
    assert days == [date(2025, 5, 30), date(2025, 5, 31), date(2025, 6, 1), date(2025, 6, 2)]
    assert date_range.total_days == 4


def test_single_day_range():
    date_range = DateRange(date(2025, 5, 4), date(2025, 5, 4))
    assert list(date_range.days()) == [date(2025, 5, 4)]


def test_start_after_end_rejected():
    with pytest.raises(ValueError):
        DateRange(date(2025, 5, 5), date(2025, 5, 4))


def test_date_range_is_immutable():
    date_range = DateRange(date(2025, 5, 4), date(2025, 5, 5))
    with pytest.raises(AttributeError):
        date_range.start = date(2025, 1, 1)
