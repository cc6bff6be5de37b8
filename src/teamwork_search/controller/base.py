"""Shared types for the search input controller.

Defines the host-facing configuration and callbacks, the suggestion
records the host supplies, and the annotated view handed to renderers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ActiveIndex sentinel meaning "no suggestion is selected"
NO_SELECTION = -1


@dataclass
class Suggestion:
    """A candidate supplied by the host.

    The controller never merges or caches these; each list the host
    delivers fully replaces the previous one.
    """

    id: str | int
    label: str
    value: str
    icon: str | None = None
    user_data: Any = None


@dataclass
class HighlightSegment:
    """A piece of a label, flagged when it matches the query."""

    text: str
    matched: bool = False


@dataclass
class PresentedSuggestion:
    """A capped suggestion annotated for rendering."""

    index: int
    suggestion: Suggestion
    segments: list[HighlightSegment] = field(default_factory=list)
    active: bool = False


class NavigationKey(Enum):
    """Keys the controller reacts to."""

    DOWN = "down"
    UP = "up"
    ENTER = "enter"
    ESCAPE = "escape"

    @classmethod
    def from_key(cls, key: str) -> NavigationKey | None:
        """Map a Textual or DOM key name to a navigation key.

        Args:
            key: Key name such as "down" or "ArrowDown"

        Returns:
            The matching NavigationKey, or None for any other key
        """
        return _KEY_ALIASES.get(key.lower())


_KEY_ALIASES: dict[str, NavigationKey] = {
    "down": NavigationKey.DOWN,
    "arrowdown": NavigationKey.DOWN,
    "up": NavigationKey.UP,
    "arrowup": NavigationKey.UP,
    "enter": NavigationKey.ENTER,
    "return": NavigationKey.ENTER,
    "escape": NavigationKey.ESCAPE,
    "esc": NavigationKey.ESCAPE,
}


@dataclass
class SearchConfig:
    """Host configuration for one search input.

    ``value`` set to anything other than None makes the input controlled
    for its whole lifetime.

    ``disabled`` ignores every user event. ``read_only`` keeps the text
    fixed but still allows focus, navigation and an Enter search.
    """

    value: str | None = None
    initial_value: str = ""
    debounce_time: float = 0.3  # seconds
    max_suggestions: int = 5
    search_on_enter_only: bool = False
    show_suggestions: bool = False
    highlight_matches: bool = True
    no_suggestions_message: str = "No suggestions found"
    disabled: bool = False
    read_only: bool = False
    auto_focus: bool = False

    def __post_init__(self) -> None:
        if self.debounce_time < 0:
            raise ValueError(f"debounce_time must be >= 0, got {self.debounce_time}")
        if self.max_suggestions < 0:
            raise ValueError(f"max_suggestions must be >= 0, got {self.max_suggestions}")

    @property
    def controlled(self) -> bool:
        return self.value is not None

    @property
    def editable(self) -> bool:
        """Whether the user may change the text."""
        return not (self.disabled or self.read_only)


@dataclass
class SearchCallbacks:
    """Callbacks into the host.

    Exceptions raised here are not contained: they abort the operation
    that triggered the callback and propagate to its caller.
    """

    on_change: Callable[[str], None] | None = None
    on_search: Callable[[str], None] | None = None
    on_clear: Callable[[], None] | None = None
    on_suggestion_select: Callable[[Suggestion], None] | None = None
    on_focus: Callable[[], None] | None = None
    on_blur: Callable[[], None] | None = None
    on_enter: Callable[[str], None] | None = None
    on_escape: Callable[[], None] | None = None
