"""Tests for the Textual application flow."""

import asyncio
import threading
from datetime import date, datetime

import pytest

from holicount.app import HolicountApp
from holicount.config import Config
from holicount.datemath import JST
from holicount.errors import HolidayFetchError
from holicount.holidays import HolidaySet
from holicount.models import SessionState
from holicount.widgets import AlertDialog, CountdownPanel, HolidayBanner

RESPECT_FOR_THE_AGED = HolidaySet({date(2023, 9, 18): "敬老の日"})


def _fixed_clock(now: datetime):
    return lambda: now


def _loader(holidays: HolidaySet):
    def load(config, today):
        return holidays

    return load


def _failing_loader(config, today):
    msg = "network unreachable"
    raise HolidayFetchError(msg)


async def _settle(app, pilot) -> None:
    """Wait for the calendar worker and the UI update it schedules."""
    await app.workers.wait_for_complete()
    await pilot.pause()


@pytest.mark.asyncio
async def test_weekday_starts_countdown():
    """Test a Wednesday: countdown shown, holiday banner hidden."""
    app = HolicountApp(
        config=Config(),
        clock=_fixed_clock(datetime(2023, 9, 6, 10, 0, tzinfo=JST)),
        loader=_loader(RESPECT_FOR_THE_AGED),
    )
    async with app.run_test() as pilot:
        await _settle(app, pilot)

        countdown = app.query_one("#countdown", CountdownPanel)
        assert app.session_state == SessionState.COUNTING
        assert app.plan.target == datetime(2023, 9, 8, 18, 0, tzinfo=JST)
        assert app.ticker.running
        assert countdown.display is True
        assert app.query_one("#holiday", HolidayBanner).display is False
        assert countdown.next_rest_day_text == "2023/09/09"
        assert countdown.slots == {
            "days": "2日",
            "hours": "08時間",
            "minutes": "00分",
            "seconds": "00秒",
        }


@pytest.mark.asyncio
async def test_saturday_shows_holiday_banner():
    """Test a Saturday: static banner, no ticking."""
    app = HolicountApp(
        config=Config(),
        clock=_fixed_clock(datetime(2023, 9, 9, 10, 0, tzinfo=JST)),
        loader=_loader(RESPECT_FOR_THE_AGED),
    )
    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert app.session_state == SessionState.HOLIDAY
        assert not app.ticker.running
        assert app.query_one("#holiday", HolidayBanner).display is True
        assert app.query_one("#countdown", CountdownPanel).display is False
        assert app.query_one("#countdown", CountdownPanel).slots == {}


@pytest.mark.asyncio
async def test_fetch_failure_alerts_once():
    """Test that a failed fetch shows one alert and starts nothing."""
    app = HolicountApp(
        config=Config(),
        clock=_fixed_clock(datetime(2023, 9, 6, 10, 0, tzinfo=JST)),
        loader=_failing_loader,
    )
    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert app.session_state == SessionState.UNAVAILABLE
        assert isinstance(app.screen, AlertDialog)
        assert sum(isinstance(screen, AlertDialog) for screen in app.screen_stack) == 1
        assert not app.ticker.running
        assert app.plan is None
        assert app.query_one("#countdown", CountdownPanel).slots == {}
        assert app.query_one("#countdown", CountdownPanel).display is False
        assert app.query_one("#holiday", HolidayBanner).display is False

        await pilot.click("#ok-button")
        await pilot.pause()
        assert not isinstance(app.screen, AlertDialog)


@pytest.mark.asyncio
async def test_reload_reevaluates_today():
    """Test that reloading picks up a new day."""
    now = {"value": datetime(2023, 9, 8, 17, 0, tzinfo=JST)}
    app = HolicountApp(
        config=Config(),
        clock=lambda: now["value"],
        loader=_loader(RESPECT_FOR_THE_AGED),
    )
    async with app.run_test() as pilot:
        await _settle(app, pilot)
        assert app.session_state == SessionState.COUNTING

        now["value"] = datetime(2023, 9, 9, 9, 0, tzinfo=JST)
        await pilot.press("r")
        await _settle(app, pilot)

        assert app.session_state == SessionState.HOLIDAY
        assert not app.ticker.running


@pytest.mark.asyncio
async def test_replaced_session_result_is_dropped():
    """Test that a slow load from before a reload cannot alert over the new countdown."""
    first_started = threading.Event()
    release_first = threading.Event()
    first_finished = threading.Event()
    calls = []

    def load(config, today):
        calls.append(today)
        if len(calls) == 1:
            first_started.set()
            try:
                release_first.wait(timeout=5)
                msg = "slow first fetch failed"
                raise HolidayFetchError(msg)
            finally:
                first_finished.set()
        return RESPECT_FOR_THE_AGED

    app = HolicountApp(
        config=Config(),
        clock=_fixed_clock(datetime(2023, 9, 6, 10, 0, tzinfo=JST)),
        loader=load,
    )
    async with app.run_test() as pilot:
        assert await asyncio.to_thread(first_started.wait, 5)
        await pilot.press("r")
        for _ in range(100):
            if app.session_state == SessionState.COUNTING:
                break
            await pilot.pause(0.05)
        assert app.session_state == SessionState.COUNTING

        release_first.set()
        assert await asyncio.to_thread(first_finished.wait, 5)
        await pilot.pause(0.2)

        assert len(calls) == 2
        assert app.session_state == SessionState.COUNTING
        assert not isinstance(app.screen, AlertDialog)
        assert not any(isinstance(screen, AlertDialog) for screen in app.screen_stack)
        assert app.ticker.running


@pytest.mark.asyncio
async def test_after_work_on_friday_pins_at_zero():
    """Test that the countdown shows zero once work has ended before the weekend."""
    app = HolicountApp(
        config=Config(),
        clock=_fixed_clock(datetime(2023, 9, 8, 19, 0, tzinfo=JST)),
        loader=_loader(RESPECT_FOR_THE_AGED),
    )
    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert app.session_state == SessionState.COUNTING
        assert app.query_one("#countdown", CountdownPanel).slots == {
            "days": "0日",
            "hours": "00時間",
            "minutes": "00分",
            "seconds": "00秒",
        }
