"""holidays-jp API integration."""

from holicount.holidays_jp.client import DEFAULT_TIMEOUT, HOLIDAYS_JP_URL, HolidaysJpSession

__all__ = ["DEFAULT_TIMEOUT", "HOLIDAYS_JP_URL", "HolidaysJpSession"]
