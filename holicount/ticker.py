"""Repeating countdown toward a fixed instant."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from textual.timer import Timer

from holicount.datemath import diff, now_jst
from holicount.duration import Duration

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0  # seconds


class IntervalHost(Protocol):
    """Anything that can schedule a repeating callback (a Textual App or Widget)."""

    def set_interval(self, interval: float, callback: Callable[[], object]) -> Timer: ...


class CountdownTicker:
    """Recompute and render the remaining time once per interval."""

    def __init__(
        self,
        host: IntervalHost,
        render: Callable[[Duration], None],
        clock: Callable[[], datetime] = now_jst,
        interval: float = TICK_INTERVAL,
    ) -> None:
        self._host = host
        self._render = render
        self._clock = clock
        self._interval = interval
        self._timer: Timer | None = None
        self.target: datetime | None = None

    @property
    def running(self) -> bool:
        """Whether a timer is scheduled."""
        return self._timer is not None

    def remaining(self) -> Duration:
        """Compute the time left until the target."""
        if self.target is None:
            msg = "CountdownTicker has not been started"
            raise RuntimeError(msg)
        return diff(self._clock(), self.target)

    def tick(self) -> Duration:
        """Compute the remaining time and render it."""
        remaining = self.remaining()
        self._render(remaining)
        return remaining

    def start(self, target: datetime) -> None:
        """Render immediately, then schedule a tick every interval."""
        self.stop()
        self.target = target
        self.tick()
        self._timer = self._host.set_interval(self._interval, self.tick)
        logger.debug("Countdown started toward %s", target)

    def stop(self) -> None:
        """Cancel the scheduled ticks."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer = None
        logger.debug("Countdown stopped")
