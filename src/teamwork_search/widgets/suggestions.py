"""Suggestion panel for the search bar.

Renders the controller's capped, highlighted view. It holds no
navigation state of its own; the active row comes from the controller.
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ..controller import PresentedSuggestion


def render_label(item: PresentedSuggestion) -> Text:
    """Build the row text, styling matched segments."""
    text = Text(no_wrap=True, overflow="ellipsis")
    if item.suggestion.icon:
        text.append(f"{item.suggestion.icon} ")
    for segment in item.segments:
        text.append(segment.text, style="bold reverse" if segment.matched else "")
    return text


class SuggestionItem(Static):
    """A single suggestion in the list."""

    DEFAULT_CSS = """
    SuggestionItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    SuggestionItem:hover {
        background: $boost;
    }

    SuggestionItem.active {
        background: $accent;
        color: $text;
    }
    """

    class Pressed(Message):
        """Fired when the item is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, item: PresentedSuggestion, **kwargs) -> None:
        self.item = item
        super().__init__(render_label(item), **kwargs)
        if item.active:
            self.add_class("active")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed(self.item.index))


class SuggestionsPanel(Widget):
    """Dropdown listing suggestions, a loading line or an empty message.

    ┌─────────────────────────────────┐
    │ Team A                          │
    │ Team B                          │
    └─────────────────────────────────┘
    """

    DEFAULT_CSS = """
    SuggestionsPanel {
        width: 100%;
        height: auto;
        max-height: 10;
        background: $surface;
        border: solid $primary;
        padding: 0;
        display: none;
    }

    SuggestionsPanel.visible {
        display: block;
    }

    SuggestionsPanel .suggestions-list {
        width: 100%;
        height: auto;
        max-height: 8;
        overflow-y: auto;
    }

    SuggestionsPanel .suggestions-status {
        width: 100%;
        height: 1;
        color: $text-muted;
        padding: 0 1;
        text-align: center;
        display: none;
    }

    SuggestionsPanel .suggestions-status.shown {
        display: block;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._items: list[SuggestionItem] = []

    def compose(self) -> ComposeResult:
        yield Vertical(id="suggestions-list", classes="suggestions-list")
        yield Static("", id="suggestions-status", classes="suggestions-status")

    @property
    def is_visible(self) -> bool:
        return self.has_class("visible")

    @property
    def items(self) -> list[SuggestionItem]:
        return list(self._items)

    def update_view(
        self,
        view: list[PresentedSuggestion],
        *,
        visible: bool,
        loading: bool = False,
        empty_message: str | None = None,
    ) -> None:
        """Redraw from controller state.

        Args:
            view: Capped suggestions with highlight segments and active flag
            visible: Whether the panel should be shown
            loading: Show a loading line instead of the list
            empty_message: Message to show when the list is empty
        """
        self.set_class(visible, "visible")

        container = self.query_one("#suggestions-list", Vertical)
        container.remove_children()
        self._items = []

        status = self.query_one("#suggestions-status", Static)
        if loading:
            status.update("Loading suggestions...")
            status.add_class("shown")
            return
        if not view:
            status.update(empty_message or "")
            status.set_class(bool(empty_message), "shown")
            return

        status.remove_class("shown")
        for item in view:
            widget = SuggestionItem(item)
            self._items.append(widget)
        container.mount_all(self._items)

        active = next((w for w in self._items if w.item.active), None)
        if active is not None:
            self.call_after_refresh(active.scroll_visible)
