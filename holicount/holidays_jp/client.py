"""holidays-jp API session and data fetching."""

import logging
from typing import Self

import requests

from holicount.errors import HolidayFetchError

logger = logging.getLogger(__name__)

HOLIDAYS_JP_URL = "https://holidays-jp.github.io/api/v1/date.json"
DEFAULT_TIMEOUT = 10.0  # seconds


class HolidaysJpSession:
    """Session for reading the holidays-jp date list."""

    def __init__(self, url: str = HOLIDAYS_JP_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._url: str = url
        self._timeout: float = timeout
        self._session: requests.Session | None = None

    def __enter__(self) -> Self:
        self._session = requests.Session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._session:
            self._session.close()
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Get the active session."""
        if not self._session:
            msg = "HolidaysJpSession should be used as a context manager"
            raise RuntimeError(msg)
        return self._session

    def get_holidays(self) -> dict[str, str]:
        """
        Fetch the raw holiday listing.

        Returns:
            Mapping of "yyyy-MM-dd" keys to holiday names, as served.

        Raises:
            HolidayFetchError: On network errors, non-success status or a body
                that is not a JSON object of strings.
        """
        logger.debug("Fetching holidays from %s", self._url)
        try:
            response = self.session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            msg = f"Could not fetch holidays from {self._url}: {e}"
            raise HolidayFetchError(msg) from e

        if not isinstance(payload, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in payload.items()
        ):
            msg = f"Unexpected holiday payload from {self._url}"
            raise HolidayFetchError(msg)

        logger.info("Fetched %d holidays", len(payload))
        return payload
