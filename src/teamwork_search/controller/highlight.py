"""Suggestion capping and match highlighting."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .base import NO_SELECTION, HighlightSegment, PresentedSuggestion, Suggestion


def highlight_segments(label: str, query: str) -> list[HighlightSegment]:
    """Split a label into alternating non-matching and matching pieces.

    The query is matched literally and case-insensitively, every
    occurrence flagged. The result always starts with a non-matching
    segment (possibly empty), so matches sit at odd positions.

    Args:
        label: Text to split
        query: Literal search text

    Returns:
        Segments that concatenate back to ``label``
    """
    if not query:
        return [HighlightSegment(label)]

    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    parts = pattern.split(label)
    return [HighlightSegment(part, matched=i % 2 == 1) for i, part in enumerate(parts)]


def present(
    suggestions: Sequence[Suggestion],
    query: str,
    max_count: int,
    *,
    active_index: int = NO_SELECTION,
    highlight: bool = True,
) -> list[PresentedSuggestion]:
    """Cap a host-ranked candidate list and annotate it for rendering.

    Host order is preserved; nothing is re-ranked or deduplicated.
    """
    capped = suggestions[: max(max_count, 0)]
    presented = []
    for i, suggestion in enumerate(capped):
        segments = (
            highlight_segments(suggestion.label, query)
            if highlight
            else [HighlightSegment(suggestion.label)]
        )
        presented.append(
            PresentedSuggestion(
                index=i,
                suggestion=suggestion,
                segments=segments,
                active=i == active_index,
            )
        )
    return presented
