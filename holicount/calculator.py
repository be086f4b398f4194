"""Work window calculation for the countdown."""

import logging
from datetime import date, datetime, timedelta

from holicount.datemath import JST, local_midnight
from holicount.holidays import HolidaySet
from holicount.models import SessionPlan, SessionState
from holicount.rest_days import future_holidays, is_rest_day, next_rest_day

logger = logging.getLogger(__name__)

# Constants
DEFAULT_END_HOUR = 18
DEFAULT_END_MINUTE = 0


def work_end_instant(
    rest_day: date, end_hour: int = DEFAULT_END_HOUR, end_minute: int = DEFAULT_END_MINUTE
) -> datetime:
    """
    Get the end of the working day before a rest day.

    Starts from local midnight of the rest day, steps back (24 - end_hour)
    hours and sets the minutes, giving the previous day at end_hour:end_minute.
    """
    if not 0 <= end_hour < 24:
        msg = f"end_hour must be 0-23: {end_hour}"
        raise ValueError(msg)
    if not 0 <= end_minute < 60:
        msg = f"end_minute must be 0-59: {end_minute}"
        raise ValueError(msg)

    previous_day_end = local_midnight(rest_day) - timedelta(hours=24 - end_hour)
    return previous_day_end.replace(minute=end_minute, second=0, microsecond=0)


def plan_session(
    now: datetime,
    holidays: HolidaySet,
    end_hour: int = DEFAULT_END_HOUR,
    end_minute: int = DEFAULT_END_MINUTE,
) -> SessionPlan:
    """
    Decide between the holiday notice and the countdown for this session.

    The rest-day check runs first, so next_rest_day never sees a weekend
    or holiday as today.
    """
    today = now.astimezone(JST).date()
    if is_rest_day(today, holidays):
        logger.info("Today (%s) is a rest day", today)
        return SessionPlan(today=today, state=SessionState.HOLIDAY)

    rest_day = next_rest_day(today, future_holidays(now, holidays))
    target = work_end_instant(rest_day, end_hour, end_minute)
    logger.info("Next rest day is %s, counting down to %s", rest_day, target)
    return SessionPlan(
        today=today,
        state=SessionState.COUNTING,
        next_rest_day=rest_day,
        next_rest_day_name=holidays.get(rest_day),
        target=target,
    )
