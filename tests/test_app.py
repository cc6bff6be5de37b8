"""Tests for the showcase application."""

import pytest

from teamwork_search.app import SearchShowcaseApp, demo_catalog
from teamwork_search.controller import SearchConfig
from teamwork_search.widgets import SearchBar, UserSearchBar


@pytest.mark.asyncio
async def test_app_launches():
    """Test that the app can be created and composed."""
    app = SearchShowcaseApp()
    async with app.run_test():
        assert app.query_one("#project-search", SearchBar) is not None
        assert app.query_one("#user-search", UserSearchBar) is not None
        assert app.query_one("#search-results") is not None
        assert app.query_one("#event-log") is not None


@pytest.mark.asyncio
async def test_initial_state():
    """Test initial application state."""
    app = SearchShowcaseApp()
    async with app.run_test():
        search = app.query_one("#project-search", SearchBar)
        assert app.search_count == 0
        assert search.search_input.has_focus
        assert search.panel.is_visible is False


@pytest.mark.asyncio
async def test_config_is_not_mutated():
    """The showcase forces suggestions on without touching the caller's config."""
    config = SearchConfig(show_suggestions=False, debounce_time=0.2)
    app = SearchShowcaseApp(config=config)
    async with app.run_test():
        search = app.query_one("#project-search", SearchBar)
        assert search.controller.config.show_suggestions is True
        assert search.controller.config.debounce_time == 0.2
    assert config.show_suggestions is False


@pytest.mark.asyncio
async def test_project_search():
    """Typing searches the catalog after the debounce."""
    app = SearchShowcaseApp(config=SearchConfig(debounce_time=0.1))
    async with app.run_test() as pilot:
        await pilot.press("a", "l", "p", "h", "a")
        await pilot.pause(0.4)

        search = app.query_one("#project-search", SearchBar)
        assert app.search_count >= 1
        assert [s.label for s in search.controller.suggestions] == ["Project Alpha"]
        assert search.panel.is_visible is True


@pytest.mark.asyncio
async def test_click_outside_dismisses():
    """Clicking the event log closes the project dropdown."""
    app = SearchShowcaseApp(config=SearchConfig(debounce_time=0.1))
    async with app.run_test(size=(100, 50)) as pilot:
        await pilot.press("t", "e", "a", "m")
        await pilot.pause(0.4)
        search = app.query_one("#project-search", SearchBar)
        assert search.panel.is_visible is True

        await pilot.click("#event-log")
        await pilot.pause()

        assert search.panel.is_visible is False


@pytest.mark.asyncio
async def test_focus_actions():
    """Test the focus bindings."""
    app = SearchShowcaseApp()
    async with app.run_test() as pilot:
        await pilot.press("f3")
        users = app.query_one("#user-search", UserSearchBar)
        assert users.search_bar.search_input.has_focus

        await pilot.press("f2")
        search = app.query_one("#project-search", SearchBar)
        assert search.search_input.has_focus


def test_demo_catalog():
    """Test the demo data."""
    catalog = demo_catalog()
    assert len(catalog) == 8
    assert [s.value for s in catalog.search("team")][:2] == ["team-a", "team-b"]
