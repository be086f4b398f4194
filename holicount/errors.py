"""Custom exceptions."""


class HolicountError(Exception):
    """Base exception for holicount."""


class HolidayFetchError(HolicountError):
    """Raised when the holiday calendar cannot be fetched or parsed."""


class InvalidConfigError(HolicountError):
    """Raised when a configuration value is malformed."""
