"""In-memory candidate sources used by the showcase app.

These stand in for the product's REST-backed lookups. The controller
never calls them; hosts query them in response to search callbacks and
push the results back with ``set_suggestions``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .controller import Suggestion

logger = logging.getLogger(__name__)


class SuggestionCatalog:
    """A fixed list of suggestions filtered by substring.

    Results keep catalog order; ranking is left to whoever builds the
    catalog.
    """

    def __init__(self, suggestions: list[Suggestion] | None = None) -> None:
        self._suggestions: list[Suggestion] = list(suggestions or [])

    def __len__(self) -> int:
        return len(self._suggestions)

    def add(self, suggestion: Suggestion) -> None:
        self._suggestions.append(suggestion)

    def search(self, query: str) -> list[Suggestion]:
        """Return suggestions whose label contains the query (case-insensitive).

        An empty query returns the whole catalog.
        """
        needle = query.strip().lower()
        if not needle:
            return list(self._suggestions)
        return [s for s in self._suggestions if needle in s.label.lower()]


@dataclass
class User:
    """A workspace member."""

    id: str
    name: str
    email: str

    def to_suggestion(self) -> Suggestion:
        return Suggestion(
            id=self.id,
            label=f"{self.name} ({self.email})",
            value=self.email,
            user_data=self,
        )


@dataclass
class UserDirectory:
    """Members searchable by email, with a most-recent-first selection history."""

    users: list[User] = field(default_factory=list)
    recent_limit: int = 5
    _recent: list[User] = field(default_factory=list, init=False, repr=False)

    @property
    def recent(self) -> list[User]:
        return list(self._recent)

    def search_by_email(self, query: str) -> list[User]:
        """Return members whose email contains the query.

        A blank query matches nobody.
        """
        needle = query.strip().lower()
        if not needle:
            return []
        matches = [u for u in self.users if needle in u.email.lower()]
        logger.debug(f"Email search {needle!r} matched {len(matches)} users")
        return matches

    def record_selection(self, user: User) -> None:
        """Move a user to the front of the recent list."""
        self._recent = [u for u in self._recent if u.id != user.id]
        self._recent.insert(0, user)
        del self._recent[self.recent_limit :]
