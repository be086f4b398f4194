"""Japanese holiday calendar loading."""

import logging
from collections.abc import Iterator, Mapping
from datetime import UTC, date, datetime, time, timedelta
from types import MappingProxyType

import jpholiday

from holicount.config import SOURCE_JPHOLIDAY, Config
from holicount.datemath import JST, format_date, local_midnight
from holicount.errors import HolidayFetchError
from holicount.holidays_jp import HolidaysJpSession

logger = logging.getLogger(__name__)

# holidays-jp keys are plain dates, which read as UTC midnight (09:00 JST)
SOURCE_HOUR_OFFSET = timedelta(hours=9)


class HolidaySet(Mapping[date, str]):
    """Read-only mapping of holiday dates to holiday names."""

    def __init__(self, holidays: Mapping[date, str] | None = None) -> None:
        self._holidays: Mapping[date, str] = MappingProxyType(dict(holidays or {}))
        self._formatted: frozenset[str] = frozenset(format_date(d) for d in self._holidays)

    def __getitem__(self, key: date) -> str:
        return self._holidays[key]

    def __iter__(self) -> Iterator[date]:
        return iter(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    def __repr__(self) -> str:
        return f"HolidaySet({dict(self._holidays)!r})"

    def is_listed(self, target_date: date) -> bool:
        """Check whether a day appears in the set, compared by yyyy/MM/dd."""
        return format_date(target_date) in self._formatted

    def midnights(self) -> dict[date, datetime]:
        """Get the local-midnight instant of every holiday."""
        return {holiday: local_midnight(holiday) for holiday in self._holidays}


def parse_holidays(raw: Mapping[str, str]) -> HolidaySet:
    """
    Parse a holidays-jp listing into a HolidaySet.

    Each key is read the way the source encodes it (UTC midnight), shifted
    into JST and then moved back by SOURCE_HOUR_OFFSET so it lands on local
    midnight of the intended day.

    Raises:
        HolidayFetchError: If a key is not a yyyy-MM-dd date.
    """
    holidays: dict[date, str] = {}
    for key, name in raw.items():
        try:
            encoded = datetime.combine(date.fromisoformat(key), time(0, 0), tzinfo=UTC)
        except ValueError as e:
            msg = f"Invalid holiday date {key!r}"
            raise HolidayFetchError(msg) from e
        normalized = encoded.astimezone(JST) - SOURCE_HOUR_OFFSET
        holidays[normalized.date()] = name
    return HolidaySet(holidays)


def fetch_holidays(url: str, timeout: float) -> HolidaySet:
    """Fetch and parse the holiday calendar from the holidays-jp API."""
    with HolidaysJpSession(url=url, timeout=timeout) as session:
        return parse_holidays(session.get_holidays())


def jpholiday_holidays(today: date) -> HolidaySet:
    """Build the holiday calendar offline for the previous, current and next year."""
    holidays: dict[date, str] = {}
    for year in range(today.year - 1, today.year + 2):
        holidays.update(jpholiday.year_holidays(year))
    return HolidaySet(holidays)


def load_holidays(config: Config, today: date) -> HolidaySet:
    """
    Load the holiday calendar from the configured source.

    Raises:
        HolidayFetchError: If the calendar cannot be fetched or parsed.
    """
    if config.holiday_source == SOURCE_JPHOLIDAY:
        holidays = jpholiday_holidays(today)
    else:
        holidays = fetch_holidays(config.endpoint, config.timeout)
    logger.info("Loaded %d holidays from %s", len(holidays), config.holiday_source)
    return holidays
