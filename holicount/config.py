"""Configuration management."""

import configparser
import os
from dataclasses import dataclass, replace
from pathlib import Path

from holicount.errors import InvalidConfigError
from holicount.holidays_jp import DEFAULT_TIMEOUT, HOLIDAYS_JP_URL

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "holicount" / "config.ini"

SOURCE_API = "api"
SOURCE_JPHOLIDAY = "jpholiday"
HOLIDAY_SOURCES = (SOURCE_API, SOURCE_JPHOLIDAY)


def parse_clock_time(value: str) -> tuple[int, int]:
    """Parse a clock time like '18:30' into (hour, minute)."""
    try:
        hours, minutes = value.strip().split(":")
        return int(hours), int(minutes)
    except ValueError as e:
        msg = f"Invalid time {value!r}, expected HH:MM"
        raise InvalidConfigError(msg) from e


@dataclass
class Config:
    """Countdown configuration."""

    holiday_source: str = SOURCE_API
    endpoint: str = HOLIDAYS_JP_URL
    work_end_hour: int = 18
    work_end_minute: int = 0
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.holiday_source not in HOLIDAY_SOURCES:
            msg = f"Unknown holiday source {self.holiday_source!r}"
            raise InvalidConfigError(msg)
        if not 0 <= self.work_end_hour < 24:
            msg = f"Work end hour must be 0-23: {self.work_end_hour}"
            raise InvalidConfigError(msg)
        if not 0 <= self.work_end_minute < 60:
            msg = f"Work end minute must be 0-59: {self.work_end_minute}"
            raise InvalidConfigError(msg)
        if self.timeout <= 0:
            msg = f"Timeout must be positive: {self.timeout}"
            raise InvalidConfigError(msg)

    @property
    def work_end(self) -> str:
        """Work end time as HH:MM."""
        return f"{self.work_end_hour:02}:{self.work_end_minute:02}"

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config | None":
        """
        Overlay environment variables on a base configuration.

        Only the variables that are set replace values from base (defaults
        when omitted). Returns None when no variable is set.
        """
        work_end = os.environ.get("HOLICOUNT_WORK_END")
        source = os.environ.get("HOLICOUNT_HOLIDAY_SOURCE")
        endpoint = os.environ.get("HOLICOUNT_ENDPOINT")
        timeout = os.environ.get("HOLICOUNT_TIMEOUT")
        if work_end is None and source is None and endpoint is None and timeout is None:
            return None

        changes: dict[str, object] = {}
        if work_end is not None:
            changes["work_end_hour"], changes["work_end_minute"] = parse_clock_time(work_end)
        if source is not None:
            changes["holiday_source"] = source
        if endpoint is not None:
            changes["endpoint"] = endpoint
        if timeout is not None:
            try:
                changes["timeout"] = float(timeout)
            except ValueError as e:
                msg = f"Invalid timeout {timeout!r}"
                raise InvalidConfigError(msg) from e
        return replace(base or cls(), **changes)

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path, encoding="utf-8")
        if not config.has_section("holicount"):
            msg = f"Missing [holicount] section in {path}"
            raise InvalidConfigError(msg)
        section = config["holicount"]
        hour, minute = parse_clock_time(section.get("workEnd", "18:00"))
        try:
            timeout = section.getfloat("timeout", DEFAULT_TIMEOUT)
        except ValueError as e:
            msg = f"Invalid timeout in {path}"
            raise InvalidConfigError(msg) from e
        return cls(
            holiday_source=section.get("source", SOURCE_API),
            endpoint=section.get("endpoint", HOLIDAYS_JP_URL),
            work_end_hour=hour,
            work_end_minute=minute,
            timeout=timeout,
        )

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Config file (or defaults) with environment variables layered on top."""
        base = cls.load(path) or cls()
        return cls.from_env(base) or base

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["holicount"] = {
            "source": self.holiday_source,
            "endpoint": self.endpoint,
            "workEnd": self.work_end,
            "timeout": str(self.timeout),
        }
        with path.open("w", encoding="utf-8") as config_file:
            config.write(config_file)
