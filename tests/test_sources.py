"""Tests for the in-memory candidate sources."""

from teamwork_search.controller import Suggestion
from teamwork_search.sources import SuggestionCatalog, User, UserDirectory


def test_catalog_search_is_case_insensitive(teams):
    catalog = SuggestionCatalog(teams)
    assert [s.id for s in catalog.search("TEAM b")] == [2]


def test_catalog_empty_query_returns_everything(teams):
    catalog = SuggestionCatalog(teams)
    assert catalog.search("  ") == teams


def test_catalog_add():
    catalog = SuggestionCatalog()
    catalog.add(Suggestion(id=1, label="Design Review", value="design-review"))
    assert len(catalog) == 1
    assert catalog.search("review")[0].value == "design-review"


def test_user_to_suggestion():
    user = User(id="u1", name="Jane Smith", email="jane@example.com")

    suggestion = user.to_suggestion()

    assert suggestion.label == "Jane Smith (jane@example.com)"
    assert suggestion.value == "jane@example.com"
    assert suggestion.user_data is user


def test_directory_search_by_email():
    directory = UserDirectory(
        users=[
            User(id="u1", name="John Doe", email="john.doe@example.com"),
            User(id="u2", name="Jane Smith", email="jane.smith@example.com"),
        ]
    )

    assert [u.id for u in directory.search_by_email("JANE")] == ["u2"]
    assert len(directory.search_by_email("example")) == 2
    assert directory.search_by_email("") == []


def test_recent_selections_are_most_recent_first():
    users = [User(id=f"u{i}", name=f"User {i}", email=f"u{i}@example.com") for i in range(4)]
    directory = UserDirectory(users=users, recent_limit=3)

    for user in users:
        directory.record_selection(user)
    directory.record_selection(users[2])

    assert [u.id for u in directory.recent] == ["u2", "u3", "u1"]
