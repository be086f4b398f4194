"""Banner shown when today is a rest day."""

from rich.text import Text
from textual.widgets import Static

HOLIDAY_MESSAGE = "本日は休日です"


class HolidayBanner(Static):
    """Static notice for a rest day; nothing ticks while it is shown."""

    def __init__(self, **kwargs) -> None:
        super().__init__(Text(HOLIDAY_MESSAGE, style="bold green"), **kwargs)
