"""Tests for date formatting and difference helpers."""

import re
from datetime import date, datetime, timedelta

import pytest

from holicount.datemath import JST, day_of_week, diff, format_date, local_midnight
from holicount.duration import Duration


def test_format_date():
    """Test yyyy/MM/dd formatting."""
    assert format_date(date(2023, 9, 6)) == "2023/09/06"
    assert format_date(date(2023, 12, 25)) == "2023/12/25"
    assert format_date(datetime(2024, 1, 2, 18, 30, tzinfo=JST)) == "2024/01/02"


@pytest.mark.parametrize(
    "target_date",
    [date(2000, 1, 1), date(2023, 9, 9), date(2024, 2, 29), date(9999, 12, 31)],
)
def test_format_date_pattern(target_date):
    """Test that formatted dates always match the fixed pattern."""
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2}", format_date(target_date))


def test_day_of_week():
    """Test Sunday-based weekday numbering."""
    assert day_of_week(date(2023, 9, 10)) == 0  # Sunday
    assert day_of_week(date(2023, 9, 6)) == 3  # Wednesday
    assert day_of_week(date(2023, 9, 9)) == 6  # Saturday


def test_local_midnight():
    """Test local midnight in JST."""
    midnight = local_midnight(date(2023, 9, 18))
    assert midnight == datetime(2023, 9, 18, 0, 0, tzinfo=JST)
    assert midnight.utcoffset() == timedelta(hours=9)


def test_diff_scenario():
    """Test the Wednesday morning to Friday evening countdown."""
    now = datetime(2023, 9, 6, 10, 0, 0, tzinfo=JST)
    target = datetime(2023, 9, 8, 18, 0, 0, tzinfo=JST)
    assert diff(now, target) == Duration(days=2, hours=8, minutes=0, seconds=0)


def test_diff_past_target():
    """Test that a target in the past yields zero."""
    now = datetime(2023, 9, 8, 18, 0, 1, tzinfo=JST)
    target = datetime(2023, 9, 8, 18, 0, 0, tzinfo=JST)
    assert diff(now, target) == Duration()
    assert diff(target, target) == Duration()


@pytest.mark.parametrize(
    "delta",
    [
        timedelta(milliseconds=999),
        timedelta(seconds=59, milliseconds=500),
        timedelta(hours=23, minutes=59, seconds=59),
        timedelta(days=3, hours=2, minutes=1, seconds=4, milliseconds=250),
        timedelta(days=45, microseconds=1),
    ],
)
def test_diff_exact_within_a_second(delta):
    """Test that the decomposition is exact to one-second resolution."""
    now = datetime(2023, 9, 6, 9, 15, tzinfo=JST)
    elapsed_ms = delta // timedelta(milliseconds=1)
    remaining = diff(now, now + delta)

    assert remaining.total_milliseconds <= elapsed_ms < remaining.total_milliseconds + 1000
    assert 0 <= remaining.hours < 24
    assert 0 <= remaining.minutes < 60
    assert 0 <= remaining.seconds < 60
