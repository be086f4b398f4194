"""Data models for the countdown session."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class SessionState(str, Enum):
    """What the countdown screen is showing."""

    LOADING = "loading"
    UNAVAILABLE = "unavailable"
    HOLIDAY = "holiday"
    COUNTING = "counting"


@dataclass(frozen=True)
class SessionPlan:
    """Decision taken once when a session starts."""

    today: date
    state: SessionState
    next_rest_day: date | None = None
    next_rest_day_name: str | None = None
    target: datetime | None = None

    @property
    def is_holiday(self) -> bool:
        """Whether today itself is a rest day."""
        return self.state == SessionState.HOLIDAY
