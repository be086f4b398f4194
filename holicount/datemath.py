"""Date formatting and difference helpers."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from holicount.duration import Duration

JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone

SATURDAY = 6
SUNDAY = 0


def now_jst() -> datetime:
    """Get the current instant in JST."""
    return datetime.now(JST)


def local_midnight(target_date: date) -> datetime:
    """Get 00:00 JST on the given calendar day."""
    return datetime.combine(target_date, time(0, 0), tzinfo=JST)


def format_date(target_date: date) -> str:
    """Format a date as yyyy/MM/dd."""
    return f"{target_date.year}/{target_date.month:02}/{target_date.day:02}"


def day_of_week(target_date: date) -> int:
    """Get the weekday with 0 = Sunday and 6 = Saturday."""
    return target_date.isoweekday() % 7


def diff(now: datetime, target: datetime) -> Duration:
    """
    Compute the remaining time from now until target.

    The difference is truncated to whole milliseconds and clamped at zero,
    so a target in the past yields an all-zero Duration.
    """
    milliseconds = (target - now) // timedelta(milliseconds=1)
    return Duration.from_milliseconds(milliseconds)
