"""Search bar widget with autocomplete dropdown.

A thin Textual adapter over SearchInputController: it forwards typing,
navigation keys, focus and clicks to the controller and redraws from the
controller's state. Host callbacks surface as Textual messages.

Keyboard:
    Up/Down     - Move through suggestions (wraps)
    Enter       - Select the active suggestion, or search now
    Escape      - Close the suggestions
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.message import Message
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Input, Static

from ..controller import (
    SearchCallbacks,
    SearchConfig,
    SearchInputController,
    Suggestion,
    TimerHandle,
)
from .suggestions import SuggestionItem, SuggestionsPanel

logger = logging.getLogger(__name__)

NAVIGATION_KEYS = frozenset(["up", "down", "enter", "escape"])

# Input actions that change the text
EDIT_ACTIONS = frozenset(
    [
        "delete_left",
        "delete_right",
        "delete_left_word",
        "delete_right_word",
        "delete_left_all",
        "delete_right_all",
        "cut",
        "paste",
    ]
)


class _WidgetTimer:
    """Adapts a Textual timer to the controller's TimerHandle."""

    def __init__(self, timer: Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class SearchInput(Input):
    """Single-line input that hands navigation keys to its search bar."""

    class Navigate(Message):
        """Fired for up/down/enter/escape instead of the default handling."""

        def __init__(self, key: str) -> None:
            super().__init__()
            self.key = key

    def __init__(self, *args, read_only: bool = False, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.read_only = read_only

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if self.read_only and action in EDIT_ACTIONS:
            return False
        return super().check_action(action, parameters)

    def _on_key(self, event: events.Key) -> None:
        """Intercept navigation keys before Input handles them."""
        if event.key in NAVIGATION_KEYS:
            event.prevent_default()
            event.stop()
            self.post_message(self.Navigate(event.key))
        elif self.read_only and event.is_printable:
            event.prevent_default()

    def _on_paste(self, event: events.Paste) -> None:
        if self.read_only:
            event.prevent_default()


class ClearControl(Static):
    """The ✕ shown while the field has text."""

    class Pressed(Message):
        """Fired when the control is clicked."""

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed())


class SearchBar(Widget):
    """Search input with debounced search and a suggestion dropdown.

    ┃ ⌕ team                        ✕
    ┌─────────────────────────────────┐
    │ Team A                          │
    │ Team B                          │
    └─────────────────────────────────┘

    Controlled use: pass ``SearchConfig(value=...)`` and write back to
    ``search_bar.value`` from the ``on_change`` callable. Writing back from a
    ``SearchBar.Changed`` handler also works, but a key that arrives before
    the message is handled still sees the previous host value.
    """

    DEFAULT_CSS = """
    SearchBar {
        width: 100%;
        height: auto;
    }

    SearchBar .search-row {
        width: 100%;
        height: auto;
        border: tall $border;
    }

    SearchBar .search-row:focus-within {
        border: tall $primary;
    }

    SearchBar .search-icon {
        width: 2;
        height: 1;
        color: $text-muted;
        margin: 0 0 0 1;
    }

    SearchBar SearchInput {
        width: 1fr;
        border: none;
        background: transparent;
        padding: 0;
        height: 1;
    }

    SearchBar SearchInput:focus {
        border: none;
    }

    SearchBar ClearControl {
        width: 3;
        height: 1;
        color: $text-muted;
        display: none;
    }

    SearchBar ClearControl.shown {
        display: block;
    }

    SearchBar ClearControl:hover {
        color: $error;
    }
    """

    class Changed(Message):
        """The user requested new text (typing, clear or selection)."""

        def __init__(self, search_bar: SearchBar, value: str) -> None:
            super().__init__()
            self.search_bar = search_bar
            self.value = value

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    class Searched(Message):
        """A search should run (debounce expired, Enter, clear or selection)."""

        def __init__(self, search_bar: SearchBar, value: str) -> None:
            super().__init__()
            self.search_bar = search_bar
            self.value = value

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    class Cleared(Message):
        """The clear control was used."""

        def __init__(self, search_bar: SearchBar) -> None:
            super().__init__()
            self.search_bar = search_bar

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    class SuggestionSelected(Message):
        """A suggestion was committed by click or Enter."""

        def __init__(self, search_bar: SearchBar, suggestion: Suggestion) -> None:
            super().__init__()
            self.search_bar = search_bar
            self.suggestion = suggestion

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    class Entered(Message):
        """Enter was pressed."""

        def __init__(self, search_bar: SearchBar, value: str) -> None:
            super().__init__()
            self.search_bar = search_bar
            self.value = value

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    class Escaped(Message):
        """Escape was pressed."""

        def __init__(self, search_bar: SearchBar) -> None:
            super().__init__()
            self.search_bar = search_bar

        @property
        def control(self) -> SearchBar:
            return self.search_bar

    def __init__(
        self,
        config: SearchConfig | None = None,
        *,
        placeholder: str = "Search...",
        suggestions: list[Suggestion] | None = None,
        show_clear: bool = True,
        on_change: Callable[[str], None] | None = None,
        **kwargs,
    ) -> None:
        """Initialize the search bar.

        Args:
            config: Controller configuration
            placeholder: Placeholder text for the empty field
            suggestions: Initial candidate list
            show_clear: Show the clear control while there is text
            on_change: Called synchronously with every requested value,
                before the Changed message. Controlled hosts write the
                value back here so it lands before the next key.
        """
        super().__init__(**kwargs)
        self._placeholder = placeholder
        self._show_clear = show_clear
        self._on_change = on_change
        # Controlled text requested from the host but not yet written back
        self._awaiting_host = False
        self.controller = SearchInputController(
            config,
            SearchCallbacks(
                on_change=self._notify_change,
                on_search=lambda value: self.post_message(self.Searched(self, value)),
                on_clear=lambda: self.post_message(self.Cleared(self)),
                on_suggestion_select=lambda s: self.post_message(
                    self.SuggestionSelected(self, s)
                ),
                on_enter=lambda value: self.post_message(self.Entered(self, value)),
                on_escape=lambda: self.post_message(self.Escaped(self)),
            ),
            schedule=self._schedule,
            focus_handler=self.focus_input,
        )
        if suggestions:
            self.controller.set_suggestions(suggestions)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="search-row"):
            yield Static("⌕", classes="search-icon")
            yield SearchInput(
                placeholder=self._placeholder,
                id="search-input",
                disabled=self.controller.config.disabled,
                read_only=self.controller.config.read_only,
            )
            yield ClearControl("✕", id="search-clear")
        yield SuggestionsPanel(id="suggestions-panel")

    def on_mount(self) -> None:
        self._render_state(sync_input=True)
        if self.controller.config.auto_focus:
            self.focus_input()

    def on_unmount(self) -> None:
        logger.debug(f"Disposing search controller for {self.id or self!r}")
        self.controller.dispose()

    # -------------------------------------------------------------------------
    # Host API
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        return self.controller.value

    @value.setter
    def value(self, value: str) -> None:
        """Push a host value (the controlled-input write path)."""
        awaiting, self._awaiting_host = self._awaiting_host, False
        # A host that keeps its old value still restores the field
        if self.controller.sync_value(value) or awaiting:
            self._refresh_view()

    @property
    def panel(self) -> SuggestionsPanel:
        return self.query_one("#suggestions-panel", SuggestionsPanel)

    @property
    def search_input(self) -> SearchInput:
        return self.query_one("#search-input", SearchInput)

    def set_suggestions(self, suggestions: list[Suggestion]) -> None:
        """Replace the candidate list."""
        self.controller.set_suggestions(suggestions)
        self._refresh_view()

    def set_loading(self, loading: bool) -> None:
        self.controller.set_loading(loading)
        self._refresh_view()

    def show_panel(self) -> None:
        if self.controller.show_panel():
            self._refresh_view(sync_input=False)

    def set_empty_message(self, message: str) -> None:
        """Change the text shown when the panel has nothing to list."""
        self.controller.no_suggestions_message = message
        self._refresh_view(sync_input=False)

    def clear(self) -> None:
        """Clear the field, as if the clear control was clicked."""
        self.controller.clear()
        self._refresh_view()

    def focus_input(self) -> None:
        """Focus the input field."""
        try:
            self.search_input.focus()
        except NoMatches:
            logger.debug("Search bar not composed yet, cannot focus input")

    def dismiss_if_outside(self, widget: Widget | None) -> bool:
        """Close the panel if ``widget`` is not part of this search bar.

        Hosts call this from their mouse-down handler.

        Returns:
            True if the interaction was outside
        """
        if widget is not None and (widget is self or self in widget.ancestors):
            return False
        if self.controller.panel_visible:
            self.controller.outside_interaction()
            self._refresh_view()
        return True

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.handle_input(event.value)
        # Controlled inputs keep the typed text until the host writes back
        self._refresh_view(sync_input=False)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Enter is handled through SearchInput.Navigate
        event.stop()

    def on_search_input_navigate(self, event: SearchInput.Navigate) -> None:
        event.stop()
        if self.controller.handle_key(event.key):
            self._refresh_view()

    def on_suggestion_item_pressed(self, event: SuggestionItem.Pressed) -> None:
        event.stop()
        if self.controller.select(event.index):
            self._refresh_view()
            self.focus_input()

    def on_clear_control_pressed(self, event: ClearControl.Pressed) -> None:
        event.stop()
        self.clear()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self.controller.focus()
        self._refresh_view(sync_input=False)

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.controller.blur()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _notify_change(self, value: str) -> None:
        if self.controller.controlled:
            self._awaiting_host = True
        if self._on_change:
            self._on_change(value)
        self.post_message(self.Changed(self, value))

    def _schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        def fire() -> None:
            callback()
            self._refresh_view(sync_input=False)

        return _WidgetTimer(self.set_timer(delay, fire, name="search-debounce"))

    def _refresh_view(self, sync_input: bool = True) -> None:
        if self.is_mounted:
            self._render_state(sync_input)

    def _render_state(self, sync_input: bool) -> None:
        """Redraw input, clear control and panel from controller state."""
        controller = self.controller
        search_input = self.search_input
        if sync_input and not self._awaiting_host and search_input.value != controller.value:
            with search_input.prevent(Input.Changed):
                search_input.value = controller.value
            search_input.cursor_position = len(controller.value)

        clear = self.query_one("#search-clear", ClearControl)
        clear.set_class(
            self._show_clear and controller.editable and bool(search_input.value), "shown"
        )

        self.panel.update_view(
            controller.view,
            visible=controller.panel_visible,
            loading=controller.loading,
            empty_message=(
                controller.no_suggestions_message if controller.show_empty_state else None
            ),
        )
