"""Search workspace members by email.

Drives a controlled, Enter-only SearchBar: the query is only sent to the
directory when the user presses Enter, so partial addresses never hit it.
With an empty query the dropdown lists recently selected members.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ..controller import SearchConfig
from ..sources import User, UserDirectory
from .search_bar import SearchBar

logger = logging.getLogger(__name__)


class UserSearchBar(Widget):
    """Member picker built on SearchBar.

    ┃ ⌕ jane@                       ✕
    ┌─────────────────────────────────┐
    │ Jane Smith (jane@example.com)   │
    └─────────────────────────────────┘
    Selected: Jane Smith
    """

    DEFAULT_CSS = """
    UserSearchBar {
        width: 100%;
        height: auto;
    }

    UserSearchBar .selected-users {
        width: 100%;
        height: auto;
        color: $text-muted;
        padding: 0 1;
    }
    """

    class UserSelected(Message):
        """Fired when a member is picked from the dropdown."""

        def __init__(self, user: User) -> None:
            super().__init__()
            self.user = user

    def __init__(
        self,
        directory: UserDirectory,
        *,
        placeholder: str = "Search users by email...",
        show_recent: bool = True,
        debounce_time: float = 0.3,
        **kwargs,
    ) -> None:
        """Initialize the member picker.

        Args:
            directory: Where members are looked up
            placeholder: Placeholder for the empty field
            show_recent: List recent selections while the query is empty
            debounce_time: Passed through to the search bar
        """
        super().__init__(**kwargs)
        self._directory = directory
        self._placeholder = placeholder
        self._show_recent = show_recent
        self._debounce_time = debounce_time
        self._search_term = ""
        self._results: list[User] = []
        self._has_searched = False
        self._selected: list[User] = []

    def compose(self) -> ComposeResult:
        yield SearchBar(
            SearchConfig(
                value="",
                debounce_time=self._debounce_time,
                show_suggestions=True,
                search_on_enter_only=True,
            ),
            placeholder=self._placeholder,
            on_change=self._write_back,
            id="user-search-bar",
        )
        yield Static("", id="selected-users", classes="selected-users")

    def on_mount(self) -> None:
        self._update_suggestions()

    @property
    def search_bar(self) -> SearchBar:
        return self.query_one("#user-search-bar", SearchBar)

    @property
    def selected_users(self) -> list[User]:
        return list(self._selected)

    def on_search_bar_changed(self, event: SearchBar.Changed) -> None:
        event.stop()
        self._search_term = event.value
        if not event.value.strip():
            self._results = []
            self._has_searched = False
        self._update_suggestions()

    def _write_back(self, value: str) -> None:
        # Controlled input: accept the requested text before the next key
        self.search_bar.value = value

    def on_search_bar_searched(self, event: SearchBar.Searched) -> None:
        event.stop()
        if not event.value.strip():
            self._results = []
            self._has_searched = False
        else:
            self._results = self._directory.search_by_email(event.value)
            self._has_searched = True
            logger.debug(f"Found {len(self._results)} users for {event.value!r}")
        self._update_suggestions()
        if self._has_searched:
            self.search_bar.show_panel()

    def on_search_bar_entered(self, event: SearchBar.Entered) -> None:
        # The search itself arrives as SearchBar.Searched
        event.stop()

    def on_search_bar_suggestion_selected(self, event: SearchBar.SuggestionSelected) -> None:
        event.stop()
        user = event.suggestion.user_data
        if not isinstance(user, User):
            return

        self._directory.record_selection(user)
        if all(u.id != user.id for u in self._selected):
            self._selected.append(user)
        self._results = []
        self._has_searched = False
        self._update_selected()
        self._update_suggestions()
        self.post_message(self.UserSelected(user))

    def _update_suggestions(self) -> None:
        if not self._search_term.strip():
            users = self._directory.recent if self._show_recent else []
        else:
            users = self._results

        bar = self.search_bar
        bar.set_suggestions([u.to_suggestion() for u in users])
        if self._has_searched:
            bar.set_empty_message("No users found")
        elif self._search_term.strip():
            bar.set_empty_message("Type email and press Enter to search")
        else:
            bar.set_empty_message("Type to search users")

    def _update_selected(self) -> None:
        names = ", ".join(u.name for u in self._selected)
        self.query_one("#selected-users", Static).update(f"Selected: {names}" if names else "")
