"""Countdown duration handling."""

from dataclasses import dataclass

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


@dataclass(frozen=True)
class Duration:
    """Remaining time split into day/hour/minute/second buckets."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        """Decompose a millisecond count, clamping negatives to zero."""
        milliseconds = max(0, milliseconds)
        return cls(
            days=milliseconds // DAY_MS,
            hours=(milliseconds % DAY_MS) // HOUR_MS,
            minutes=(milliseconds % HOUR_MS) // MINUTE_MS,
            seconds=(milliseconds % MINUTE_MS) // SECOND_MS,
        )

    @property
    def total_milliseconds(self) -> int:
        """Milliseconds represented by the buckets (sub-second part dropped)."""
        return (
            self.days * DAY_MS
            + self.hours * HOUR_MS
            + self.minutes * MINUTE_MS
            + self.seconds * SECOND_MS
        )

    @property
    def is_zero(self) -> bool:
        """Whether the countdown has run out."""
        return self.total_milliseconds == 0

    def display_fields(self) -> dict[str, str]:
        """Days unpadded, the rest zero-padded to two digits."""
        return {
            "days": str(self.days),
            "hours": f"{self.hours:02}",
            "minutes": f"{self.minutes:02}",
            "seconds": f"{self.seconds:02}",
        }

    def __bool__(self) -> bool:
        return not self.is_zero
