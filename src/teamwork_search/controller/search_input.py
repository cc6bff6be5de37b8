"""Autocomplete search input controller.

Composes the value reconciler, debounce scheduler, highlighter, keyboard
navigation and visibility rules into one renderer-independent state
machine. Every operation runs synchronously inside the triggering event;
the only deferred work is the debounced search, which re-enters through
the host's ``on_search`` callback.

Host callbacks are not guarded. If one raises, the exception propagates
out of the operation that triggered it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .base import (
    NavigationKey,
    PresentedSuggestion,
    SearchCallbacks,
    SearchConfig,
    Suggestion,
)
from .debounce import DebounceScheduler, TimerFactory
from .highlight import present
from .navigation import NavigationState
from .value import ValueReconciler
from .visibility import VisibilityController

logger = logging.getLogger(__name__)


class SearchInputController:
    """State machine behind one search input.

    Renderers feed it events (typing, keys, focus, pointer) and read back
    ``value``, ``panel_visible``, ``view`` and ``active_index``.

    Usage:
        controller = SearchInputController(
            SearchConfig(show_suggestions=True),
            SearchCallbacks(on_search=fetch_candidates),
        )
        controller.handle_input("team")
        controller.set_suggestions(results)
        controller.handle_key("down")
        controller.handle_key("enter")
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        callbacks: SearchCallbacks | None = None,
        *,
        schedule: TimerFactory | None = None,
        focus_handler: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Host configuration (defaults to an uncontrolled input)
            callbacks: Host callbacks
            schedule: Timer backend for the debounce scheduler
            focus_handler: Renderer hook that moves focus to the field
        """
        self._config = config or SearchConfig()
        self._callbacks = callbacks or SearchCallbacks()
        self._focus_handler = focus_handler

        self._reconciler = ValueReconciler(
            self._config.value,
            self._config.initial_value,
            on_change=self._callbacks.on_change,
        )
        self._debounce = DebounceScheduler(
            self._config.debounce_time,
            self._dispatch_search,
            search_on_enter_only=self._config.search_on_enter_only,
            schedule=schedule,
        )
        self._navigation = NavigationState()
        self._visibility = VisibilityController(self._config.show_suggestions)

        self._suggestions: list[Suggestion] = []
        self._loading = False
        self._no_suggestions_message = self._config.no_suggestions_message

    # -------------------------------------------------------------------------
    # Exposed state
    # -------------------------------------------------------------------------

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def value(self) -> str:
        return self._reconciler.current_value()

    @property
    def controlled(self) -> bool:
        return self._reconciler.controlled

    @property
    def editable(self) -> bool:
        return self._config.editable

    @property
    def panel_visible(self) -> bool:
        return self._visibility.visible

    @property
    def focused(self) -> bool:
        return self._visibility.focused

    @property
    def active_index(self) -> int:
        return self._navigation.index

    @property
    def suggestions(self) -> list[Suggestion]:
        """The uncapped list most recently supplied by the host."""
        return list(self._suggestions)

    @property
    def view(self) -> list[PresentedSuggestion]:
        """Capped, highlighted suggestions with the active one flagged."""
        return present(
            self._suggestions,
            self.value,
            self._config.max_suggestions,
            active_index=self._navigation.index,
            highlight=self._config.highlight_matches,
        )

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def show_empty_state(self) -> bool:
        """Panel is open and the host supplied no candidates at all."""
        return self.panel_visible and not self._loading and not self._suggestions

    @property
    def no_suggestions_message(self) -> str:
        return self._no_suggestions_message

    @no_suggestions_message.setter
    def no_suggestions_message(self, message: str) -> None:
        self._no_suggestions_message = message

    @property
    def search_pending(self) -> bool:
        return self._debounce.pending

    # -------------------------------------------------------------------------
    # Host-driven updates
    # -------------------------------------------------------------------------

    def set_suggestions(self, suggestions: Iterable[Suggestion]) -> None:
        """Replace the candidate list wholesale."""
        self._suggestions = list(suggestions)
        self._navigation.reset()
        logger.debug(f"Received {len(self._suggestions)} suggestions")

    def set_loading(self, loading: bool) -> None:
        """Mark candidates as being fetched by the host."""
        self._loading = loading

    def sync_value(self, value: str | None) -> bool:
        """Adopt a value pushed by the host.

        Returns:
            True if the current value changed
        """
        changed = self._reconciler.sync_external(value)
        if changed:
            self._navigation.reset()
        return changed

    # -------------------------------------------------------------------------
    # User events
    # -------------------------------------------------------------------------

    def handle_input(self, text: str) -> None:
        """Handle a keystroke that changed the field's text."""
        if not self.editable:
            logger.debug("Ignoring input on a non-editable search field")
            return
        self._reconciler.set_value(text)
        self._navigation.reset()
        self._debounce.notify_changed(text)
        self._visibility.typed()

    def handle_key(self, key: NavigationKey | str) -> bool:
        """Handle a navigation key.

        Args:
            key: A NavigationKey or a key name ("down", "ArrowDown", ...)

        Returns:
            True if the key was consumed
        """
        nav_key = key if isinstance(key, NavigationKey) else NavigationKey.from_key(key)
        if nav_key is None or self._config.disabled:
            return False

        count = self._capped_count()
        navigable = self.panel_visible and count > 0

        if nav_key is NavigationKey.DOWN:
            if not navigable:
                return False
            self._navigation.move_down(count)
            return True

        if nav_key is NavigationKey.UP:
            if not navigable:
                return False
            self._navigation.move_up(count)
            return True

        if nav_key is NavigationKey.ENTER:
            if navigable and self._navigation.is_selected and self.editable:
                committed = self._suggestions[self._navigation.index].value
                self.select(self._navigation.index)
            else:
                committed = self.value
                self.submit()
            self._emit("on_enter", committed)
            return True

        # Escape leaves the text alone
        self._visibility.close()
        self._navigation.reset()
        self._emit("on_escape")
        return True

    def select(self, index: int) -> bool:
        """Commit the suggestion at ``index`` of the capped list.

        Returns:
            False if the index is outside the capped list or the field
            is not editable
        """
        if not self.editable or not 0 <= index < self._capped_count():
            return False

        suggestion = self._suggestions[index]
        logger.debug(f"Selected suggestion {suggestion.id!r}")
        self._debounce.cancel()
        self._reconciler.set_value(suggestion.value)
        if not self.controlled:
            self._emit("on_search", suggestion.value)
        self._emit("on_suggestion_select", suggestion)
        self._visibility.close()
        self._navigation.reset()
        return True

    def submit(self) -> None:
        """Search immediately, regardless of any pending timer."""
        self._debounce.cancel()
        value = self.value
        self._emit("on_search", value)
        self._visibility.close()
        self._navigation.reset()

    def clear(self) -> None:
        """Empty the field and refocus it."""
        if not self.editable:
            return
        self._debounce.cancel()
        self._reconciler.set_value("")
        self._navigation.reset()
        if self._focus_handler:
            self._focus_handler()
        if not self.controlled:
            self._emit("on_search", "")
        self._emit("on_clear")

    def focus(self) -> None:
        if self._config.disabled:
            return
        self._visibility.focus(self._capped_count() > 0, self.value)
        self._emit("on_focus")

    def blur(self) -> None:
        self._visibility.blur()
        self._emit("on_blur")

    def show_panel(self) -> bool:
        """Reopen the panel for a focused input with suggestions enabled.

        Returns:
            Whether the panel is visible afterwards
        """
        return self._visibility.reveal()

    def outside_interaction(self) -> None:
        """Dismiss after a pointer or focus event outside input and panel."""
        self._visibility.outside_interaction()
        self._navigation.reset()

    def dispose(self) -> None:
        """Release the pending timer. Call when the input is unmounted."""
        self._debounce.dispose()
        self._visibility.close()
        self._navigation.reset()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _capped_count(self) -> int:
        return min(len(self._suggestions), max(self._config.max_suggestions, 0))

    def _dispatch_search(self, text: str) -> None:
        self._emit("on_search", text)

    def _emit(self, name: str, *args: Any) -> None:
        callback = getattr(self._callbacks, name)
        if callback:
            callback(*args)
