"""Shared fixtures: a manual clock for debounce timers and a callback recorder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from teamwork_search.controller import SearchCallbacks, Suggestion


@dataclass
class FakeTimer:
    """A timer on the manual clock."""

    when: float
    callback: Any
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """Timer backend that only advances when told to."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def schedule(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due timers in order."""
        target = self.now + seconds
        while True:
            due = sorted((t for t in self.active if t.when <= target), key=lambda t: t.when)
            if not due:
                break
            timer = due[0]
            self.now = timer.when
            timer.fired = True
            timer.callback()
        self.now = target


@dataclass
class CallbackRecorder:
    """Records every host callback in order."""

    calls: list[tuple[str, Any]] = field(default_factory=list)

    def callbacks(self) -> SearchCallbacks:
        return SearchCallbacks(
            on_change=lambda v: self.calls.append(("change", v)),
            on_search=lambda v: self.calls.append(("search", v)),
            on_clear=lambda: self.calls.append(("clear", None)),
            on_suggestion_select=lambda s: self.calls.append(("select", s)),
            on_focus=lambda: self.calls.append(("focus", None)),
            on_blur=lambda: self.calls.append(("blur", None)),
            on_enter=lambda v: self.calls.append(("enter", v)),
            on_escape=lambda: self.calls.append(("escape", None)),
        )

    def of(self, name: str) -> list[Any]:
        return [value for kind, value in self.calls if kind == name]

    def names(self) -> list[str]:
        return [kind for kind, _ in self.calls]


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def teams() -> list[Suggestion]:
    return [
        Suggestion(id=1, label="Team A", value="team-a"),
        Suggestion(id=2, label="Team B", value="team-b"),
    ]


@pytest.fixture
def many_suggestions() -> list[Suggestion]:
    return [Suggestion(id=i, label=f"Item {i}", value=f"item-{i}") for i in range(8)]
