"""Teamwork Search - Showcase Application.

Two search inputs driven by the same controller:
- a project/team search with debounced suggestions
- a member picker that only searches on Enter
"""

from __future__ import annotations

import logging
from dataclasses import replace

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, RichLog, Static

from .controller import SearchConfig, Suggestion
from .sources import SuggestionCatalog, User, UserDirectory
from .widgets.search_bar import SearchBar
from .widgets.user_search import UserSearchBar

logger = logging.getLogger(__name__)


def demo_catalog() -> SuggestionCatalog:
    """Projects and teams for the showcase."""
    return SuggestionCatalog(
        [
            Suggestion(id=1, label="Team A", value="team-a", icon="◆"),
            Suggestion(id=2, label="Team B", value="team-b", icon="◆"),
            Suggestion(id=3, label="Project Alpha", value="project-alpha", icon="▣"),
            Suggestion(id=4, label="Project Beta", value="project-beta", icon="▣"),
            Suggestion(id=5, label="Release Planning", value="release-planning", icon="▣"),
            Suggestion(id=6, label="Design Review", value="design-review", icon="▣"),
            Suggestion(id=7, label="Platform Team", value="platform-team", icon="◆"),
            Suggestion(id=8, label="Support Rotation", value="support-rotation", icon="▣"),
        ]
    )


def demo_directory() -> UserDirectory:
    """Workspace members for the showcase."""
    return UserDirectory(
        users=[
            User(id="u1", name="John Doe", email="john.doe@example.com"),
            User(id="u2", name="Jane Smith", email="jane.smith@example.com"),
            User(id="u3", name="Robert Johnson", email="robert.johnson@example.com"),
            User(id="u4", name="Emily Davis", email="emily.davis@example.com"),
        ]
    )


class SearchShowcaseApp(App):
    """Showcase for the search bar widgets.

    ┌─ Teamwork Search ───────────────────────────────────────────┐
    │ Projects & teams                                            │
    │ ┃ ⌕ team                                                  ✕ │
    │ ┌─────────────────────────────┐                             │
    │ │ ◆ Team A                    │                             │
    │ └─────────────────────────────┘                             │
    │ Members                                                     │
    │ ┃ ⌕ Search users by email...                                │
    │ ┌─ Events ────────────────────────────────────────────────┐ │
    │ │ search: team                                            │ │
    │ └─────────────────────────────────────────────────────────┘ │
    └─────────────────────────────────────────────────────────────┘
    """

    CSS_PATH = "styles/showcase.tcss"
    TITLE = "Teamwork Search"

    BINDINGS = [
        Binding("f2", "focus_search", "Search", show=True),
        Binding("f3", "focus_users", "Members", show=True),
        Binding("ctrl+l", "clear_log", "Clear log", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: SearchConfig | None = None,
        catalog: SuggestionCatalog | None = None,
        directory: UserDirectory | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        # The showcase always offers suggestions on the project search
        self._config = replace(config or SearchConfig(), show_suggestions=True)
        self._catalog = catalog or demo_catalog()
        self._directory = directory or demo_directory()
        self._search_count = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="showcase"):
            yield Static("Projects & teams", classes="section-title")
            yield SearchBar(
                self._config,
                placeholder="Search projects and teams...",
                id="project-search",
            )
            yield Static("", id="search-results")
            yield Static("Members", classes="section-title")
            yield UserSearchBar(
                self._directory,
                debounce_time=self._config.debounce_time,
                id="user-search",
            )
            yield RichLog(id="event-log", markup=True)
        yield Footer()

    @property
    def search_count(self) -> int:
        """Number of project searches dispatched so far."""
        return self._search_count

    def on_mount(self) -> None:
        self.action_focus_search()
        logger.info("Showcase mounted")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Dismiss dropdowns when clicking anywhere else."""
        for search_bar in self.query(SearchBar):
            search_bar.dismiss_if_outside(event.widget)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_focus_search(self) -> None:
        self.query_one("#project-search", SearchBar).focus_input()

    def action_focus_users(self) -> None:
        self.query_one("#user-search", UserSearchBar).search_bar.focus_input()

    def action_clear_log(self) -> None:
        self.query_one("#event-log", RichLog).clear()

    # -------------------------------------------------------------------------
    # Search bar events
    # -------------------------------------------------------------------------

    def on_search_bar_searched(self, event: SearchBar.Searched) -> None:
        self._search_count += 1
        results = self._catalog.search(event.value)
        event.search_bar.set_suggestions(results)
        summary = f"Results for: {event.value}" if event.value else ""
        self.query_one("#search-results", Static).update(summary)
        self._log(f"[b]search[/b] {escape(repr(event.value))} → {len(results)} results")

    def on_search_bar_changed(self, event: SearchBar.Changed) -> None:
        self._log(f"change {escape(repr(event.value))}")

    def on_search_bar_suggestion_selected(self, event: SearchBar.SuggestionSelected) -> None:
        suggestion = event.suggestion
        self._log(f"[b]selected[/b] {escape(suggestion.label)} ({escape(suggestion.value)})")

    def on_search_bar_cleared(self, event: SearchBar.Cleared) -> None:
        self._log("cleared")

    def on_search_bar_entered(self, event: SearchBar.Entered) -> None:
        self._log(f"enter {escape(repr(event.value))}")

    def on_search_bar_escaped(self, event: SearchBar.Escaped) -> None:
        self._log("escape")

    def on_user_search_bar_user_selected(self, event: UserSearchBar.UserSelected) -> None:
        self._log(f"[b]member[/b] {escape(event.user.name)} <{escape(event.user.email)}>")
        self.notify(f"Added {event.user.name}", title="Members")

    def _log(self, line: str) -> None:
        self.query_one("#event-log", RichLog).write(line)


def run(config: SearchConfig | None = None) -> None:
    """Run the showcase app."""
    app = SearchShowcaseApp(config=config)
    app.run()
