"""Main Textual application."""

import logging
from collections.abc import Callable
from datetime import date, datetime
from functools import partial
from typing import ClassVar, TypeAlias

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Header, LoadingIndicator, Static
from textual.worker import get_current_worker

from holicount.calculator import plan_session
from holicount.config import Config
from holicount.datemath import JST, format_date, now_jst
from holicount.duration import Duration
from holicount.errors import HolidayFetchError
from holicount.holidays import HolidaySet, load_holidays
from holicount.models import SessionPlan, SessionState
from holicount.ticker import CountdownTicker
from holicount.widgets import AlertDialog, CountdownPanel, HolidayBanner

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = (
    "通信エラーが発生しました。\n"
    "しばらく経ってから再度画面を再読み込みしてください。"
)

HolidayLoader: TypeAlias = Callable[[Config, date], HolidaySet]


class HolicountApp(App):
    """Countdown to the end of work before the next rest day."""

    CSS = """
    #main-container {
        height: 100%;
        align: center middle;
    }

    #today {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    #loading-indicator {
        height: 3;
        display: none;
    }

    #loading-indicator.visible {
        display: block;
    }

    #countdown {
        display: none;
        height: auto;
        padding: 1;
        border: solid $primary;
    }

    #nextHoliday {
        width: 100%;
        text-align: center;
    }

    #countdown-row {
        height: auto;
        width: 100%;
    }

    .countdown-slot {
        width: 1fr;
        text-align: center;
    }

    #holiday {
        display: none;
        width: 100%;
        text-align: center;
        padding: 1;
        border: solid $success;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        clock: Callable[[], datetime] = now_jst,
        loader: HolidayLoader = load_holidays,
    ) -> None:
        super().__init__()
        self.config = config or Config.resolve()
        self.clock = clock
        self.loader = loader
        self.session_state = SessionState.LOADING
        self.plan: SessionPlan | None = None
        self.session_start: datetime | None = None
        self.session_id = 0
        self.ticker = CountdownTicker(self, self._render_remaining, clock=clock)

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"):
            yield Static("", id="today")
            yield LoadingIndicator(id="loading-indicator")
            yield CountdownPanel(id="countdown")
            yield HolidayBanner(id="holiday")
        yield Footer()

    def on_mount(self) -> None:
        """Start the first session when the app starts."""
        self.title = "holicount"
        self.start_session()

    def on_unmount(self) -> None:
        """Cancel the countdown timer."""
        self.ticker.stop()

    def start_session(self) -> None:
        """Capture today and load the holiday calendar in the background."""
        self.ticker.stop()
        self.plan = None
        self.session_state = SessionState.LOADING
        self.session_id += 1
        self.session_start = self.clock().astimezone(JST)
        self.sub_title = f"Work ends at {self.config.work_end}"
        self.query_one("#today", Static).update(f"- {format_date(self.session_start)} -")
        self.query_one("#countdown", CountdownPanel).display = False
        self.query_one("#holiday", HolidayBanner).display = False
        self.query_one("#loading-indicator", LoadingIndicator).add_class("visible")
        self.run_worker(
            partial(self._load_calendar, self.session_id, self.session_start),
            name="calendar",
            exclusive=True,
            thread=True,
        )

    def _load_calendar(self, session_id: int, session_start: datetime) -> None:
        """Fetch the holiday calendar (runs in a worker thread)."""
        worker = get_current_worker()
        try:
            holidays = self.loader(self.config, session_start.date())
        except HolidayFetchError as e:
            if worker.is_cancelled:
                logger.debug("Dropping failed load from replaced session %d", session_id)
                return
            logger.warning("Holiday calendar unavailable: %s", e)
            self.call_from_thread(self._show_fetch_failure, session_id)
            return

        if worker.is_cancelled:
            logger.debug("Dropping holidays from replaced session %d", session_id)
            return
        self.call_from_thread(self._begin, session_id, session_start, holidays)

    def _is_stale(self, session_id: int) -> bool:
        """Whether a result belongs to a session replaced by a reload."""
        return session_id != self.session_id

    def _show_fetch_failure(self, session_id: int) -> None:
        """Alert the user once and stop initializing."""
        if self._is_stale(session_id):
            return
        self.session_state = SessionState.UNAVAILABLE
        self.query_one("#loading-indicator", LoadingIndicator).remove_class("visible")
        self.push_screen(AlertDialog(FETCH_ERROR_MESSAGE))

    def _begin(self, session_id: int, session_start: datetime, holidays: HolidaySet) -> None:
        """Show the holiday notice or start counting down (must run on main thread)."""
        if self._is_stale(session_id):
            return
        self.query_one("#loading-indicator", LoadingIndicator).remove_class("visible")
        self.plan = plan_session(
            session_start,
            holidays,
            self.config.work_end_hour,
            self.config.work_end_minute,
        )
        self.session_state = self.plan.state

        if self.plan.is_holiday:
            self.handle_display(is_holiday=True)
            return

        countdown = self.query_one("#countdown", CountdownPanel)
        countdown.show_next_rest_day(self.plan.next_rest_day, self.plan.next_rest_day_name)
        self.ticker.start(self.plan.target)
        self.handle_display(is_holiday=False)

    def _render_remaining(self, remaining: Duration) -> None:
        """Push one tick into the countdown slots."""
        self.query_one("#countdown", CountdownPanel).update_remaining(remaining)

    def handle_display(self, is_holiday: bool) -> None:
        """Show either the countdown or the holiday banner."""
        self.query_one("#countdown", CountdownPanel).display = not is_holiday
        self.query_one("#holiday", HolidayBanner).display = is_holiday

    def action_reload(self) -> None:
        """Re-evaluate today and reload the holiday calendar."""
        self.notify("Reloading holidays...", severity="information")
        self.start_session()
