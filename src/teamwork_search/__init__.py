"""Teamwork Search - autocomplete search input for the terminal.

A renderer-independent search input controller with Textual widgets
on top, built with Textual + Rich.
"""

from .app import SearchShowcaseApp, run
from .controller import SearchCallbacks, SearchConfig, SearchInputController, Suggestion

__version__ = "0.1.0"
__all__ = [
    "SearchCallbacks",
    "SearchConfig",
    "SearchInputController",
    "SearchShowcaseApp",
    "Suggestion",
    "run",
]
