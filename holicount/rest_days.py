"""Rest day (weekend or public holiday) rules."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from holicount.datemath import SATURDAY, SUNDAY, day_of_week
from holicount.holidays import HolidaySet


def is_rest_day(today: date, holidays: HolidaySet) -> bool:
    """
    Check if a day is a rest day.

    A rest day is:
    - A day listed in the holiday calendar
    - A Saturday or Sunday
    """
    if holidays.is_listed(today):
        return True
    return day_of_week(today) in (SATURDAY, SUNDAY)


def future_holidays(today: datetime, holidays: HolidaySet) -> list[date]:
    """Get the holidays whose local midnight is at or after the given instant."""
    return sorted(
        holiday for holiday, midnight in holidays.midnights().items() if midnight >= today
    )


def next_rest_day(today: date, upcoming_holidays: Iterable[date]) -> date:
    """
    Get the nearest rest day strictly after today.

    The candidate weekend day is the coming Saturday, or Sunday when today is
    already Saturday. The earliest upcoming holiday wins if it comes first.
    """
    days_until_saturday = SATURDAY - day_of_week(today)
    if days_until_saturday == 0:
        weekend_day = today + timedelta(days=1)
    else:
        weekend_day = today + timedelta(days=days_until_saturday)

    candidates = [holiday for holiday in upcoming_holidays if holiday > today]
    return min([weekend_day, *candidates])
