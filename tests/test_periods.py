from datetime import date, datetime, timedelta

import pytest

from timesheets.utils import format_period_range, get_period_start_end_dates, parse_date


@pytest.mark.parametrize('offset', range(7))
def test_each_weekday_maps_to_its_own_monday(offset):
    day = date(2024, 1, 8) + timedelta(days=offset)
    assert get_period_start_end_dates(day) == (date(2024, 1, 8), date(2024, 1, 21))


@pytest.mark.parametrize('day', [date(2024, 1, 10), date(2023, 12, 31), date(2024, 2, 29), date(2025, 6, 1)])
def test_period_starts_on_monday_and_spans_fourteen_days(day):
    start, end = get_period_start_end_dates(day)
    assert start.weekday() == 0
    assert (end - start).days == 13
    assert start <= day <= end
    assert (day - start).days < 7


def test_second_week_starts_a_new_window():
    assert get_period_start_end_dates(date(2024, 1, 17)) == (date(2024, 1, 15), date(2024, 1, 28))


def test_accepts_datetime():
    assert get_period_start_end_dates(datetime(2024, 1, 20, 17, 45)) == (date(2024, 1, 15), date(2024, 1, 28))


def test_format_period_range():
    assert format_period_range(date(2024, 1, 1), date(2024, 1, 14)) == 'Jan 01 - Jan 14, 2024'
    assert format_period_range(date(2023, 12, 25), date(2024, 1, 7)) == 'Dec 25, 2023 - Jan 07, 2024'


@pytest.mark.parametrize('value,expected', [
    ('2024-02-29', date(2024, 2, 29)),
    ('2024-02-30', None),
    ('not-a-date', None),
    ('', None),
    (None, None),
])
def test_parse_date(value, expected):
    assert parse_date(value) == expected
