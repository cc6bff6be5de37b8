"""Debounced search dispatch.

Coalesces a burst of keystrokes into one delayed search. Cancellation is
an explicit state transition: every arm or cancel advances a timer token,
and a firing timer whose token is no longer current does nothing.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled."""

    def cancel(self) -> None: ...


# schedule(delay_seconds, callback) -> handle
TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def asyncio_timer(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule ``callback`` on the running event loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class DebounceScheduler:
    """Holds at most one pending search timer per input.

    Usage:
        scheduler = DebounceScheduler(0.3, on_fire=run_search)

        scheduler.notify_changed("t")
        scheduler.notify_changed("te")   # cancels the "t" timer
        # ... 0.3s later run_search("te") is called exactly once

        scheduler.dispose()              # on unmount
    """

    def __init__(
        self,
        delay: float,
        on_fire: Callable[[str], None],
        *,
        search_on_enter_only: bool = False,
        schedule: TimerFactory | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            delay: Quiet interval in seconds before a search fires
            on_fire: Called with the text captured when the timer was armed
            search_on_enter_only: Never arm timers; searches only happen on submit
            schedule: Timer backend (defaults to the running asyncio loop)
        """
        self._delay = delay
        self._on_fire = on_fire
        self._search_on_enter_only = search_on_enter_only
        self._schedule = schedule or asyncio_timer
        self._pending: TimerHandle | None = None
        self._token = 0
        self._disposed = False

    @property
    def pending(self) -> bool:
        """Whether a search timer is outstanding."""
        return self._pending is not None

    @property
    def token(self) -> int:
        """Current timer token. Advances on every arm and cancel."""
        return self._token

    def notify_changed(self, text: str) -> None:
        """Record a keystroke, superseding any outstanding timer."""
        self.cancel()
        if self._search_on_enter_only or self._disposed:
            return

        self._token += 1
        token = self._token

        def fire() -> None:
            if token != self._token:
                logger.debug(f"Dropping superseded search timer {token}")
                return
            self._pending = None
            self._token += 1
            logger.debug(f"Search timer {token} fired for {text!r}")
            self._on_fire(text)

        self._pending = self._schedule(self._delay, fire)
        logger.debug(f"Armed search timer {token} for {text!r} ({self._delay}s)")

    def cancel(self) -> None:
        """Cancel the outstanding timer, if any."""
        if self._pending is None:
            return
        self._pending.cancel()
        self._pending = None
        self._token += 1
        logger.debug("Cancelled pending search timer")

    def dispose(self) -> None:
        """Cancel any timer and refuse to arm new ones."""
        self.cancel()
        self._disposed = True
