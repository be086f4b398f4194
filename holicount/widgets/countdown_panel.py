"""Countdown panel widget showing the time left before the next rest day."""

from datetime import date

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Static

from holicount.datemath import format_date
from holicount.duration import Duration

UNIT_SUFFIXES = {"days": "日", "hours": "時間", "minutes": "分", "seconds": "秒"}


class CountdownPanel(Container):
    """Panel with the next rest day and a day/hour/minute/second countdown."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.next_rest_day_text = ""
        self.slots: dict[str, str] = {}

    def compose(self) -> ComposeResult:
        """Compose the countdown panel."""
        yield Static("", id="nextHoliday")
        with Horizontal(id="countdown-row"):
            for slot in UNIT_SUFFIXES:
                yield Static("", id=slot, classes="countdown-slot")

    def show_next_rest_day(self, rest_day: date, name: str | None = None) -> None:
        """Display the date (and holiday name, if any) being counted down to."""
        self.next_rest_day_text = format_date(rest_day)
        if name:
            self.next_rest_day_text = f"{self.next_rest_day_text} {name}"
        self.query_one("#nextHoliday", Static).update(
            Text(self.next_rest_day_text, style="bold")
        )

    def update_remaining(self, remaining: Duration) -> None:
        """Push the formatted duration into the four countdown slots."""
        style = "bold cyan" if remaining else "dim"
        for slot, value in remaining.display_fields().items():
            self.slots[slot] = f"{value}{UNIT_SUFFIXES[slot]}"
            self.query_one(f"#{slot}", Static).update(Text(self.slots[slot], style=style))
