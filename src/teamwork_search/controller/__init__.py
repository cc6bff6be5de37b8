"""Renderer-independent search input controller.

Components:
- ValueReconciler: controlled/uncontrolled text ownership
- DebounceScheduler: coalesces keystrokes into one delayed search
- present/highlight_segments: caps and highlights candidates
- NavigationState: keyboard cursor over the capped list
- VisibilityController: panel open/close and dismissal
- SearchInputController: composes all of the above
"""

from .base import (
    NO_SELECTION,
    HighlightSegment,
    NavigationKey,
    PresentedSuggestion,
    SearchCallbacks,
    SearchConfig,
    Suggestion,
)
from .debounce import DebounceScheduler, TimerFactory, TimerHandle, asyncio_timer
from .highlight import highlight_segments, present
from .navigation import NavigationState
from .search_input import SearchInputController
from .value import ValueReconciler
from .visibility import VisibilityController

__all__ = [
    "NO_SELECTION",
    "DebounceScheduler",
    "HighlightSegment",
    "NavigationKey",
    "NavigationState",
    "PresentedSuggestion",
    "SearchCallbacks",
    "SearchConfig",
    "SearchInputController",
    "Suggestion",
    "TimerFactory",
    "TimerHandle",
    "ValueReconciler",
    "VisibilityController",
    "asyncio_timer",
    "highlight_segments",
    "present",
]
