"""Textual widgets for the search input."""

from .search_bar import ClearControl, SearchBar, SearchInput
from .suggestions import SuggestionItem, SuggestionsPanel
from .user_search import UserSearchBar

__all__ = [
    "ClearControl",
    "SearchBar",
    "SearchInput",
    "SuggestionItem",
    "SuggestionsPanel",
    "UserSearchBar",
]
