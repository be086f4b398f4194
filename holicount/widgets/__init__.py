"""Textual widgets for the TUI."""

from holicount.widgets.alert_dialog import AlertDialog
from holicount.widgets.countdown_panel import CountdownPanel
from holicount.widgets.holiday_banner import HolidayBanner

__all__ = ["AlertDialog", "CountdownPanel", "HolidayBanner"]
