"""Suggestion panel visibility and dismissal."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class VisibilityController:
    """Decides when the suggestion panel is shown.

    Opens on focus (when there is something to show) and on typing.
    Closes on selection, submit, escape or an outside interaction.
    Losing focus alone never closes it: clicking a suggestion blurs the
    input first, and that must not count as dismissal.
    """

    def __init__(self, enabled: bool = False) -> None:
        """Initialize the controller.

        Args:
            enabled: Whether this input shows suggestions at all
        """
        self._enabled = enabled
        self._visible = False
        self._focused = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def focused(self) -> bool:
        return self._focused

    def focus(self, has_candidates: bool, query: str) -> bool:
        """Handle the field gaining focus.

        A non-empty query with no candidates still opens the panel so the
        renderer can show its empty state.

        Returns:
            Whether the panel is visible afterwards
        """
        self._focused = True
        if self._enabled and (has_candidates or query.strip()):
            self._open("focus")
        return self._visible

    def blur(self) -> None:
        self._focused = False

    def typed(self) -> None:
        """Handle a keystroke."""
        self._focused = True
        if self._enabled:
            self._open("typing")

    def close(self) -> None:
        if self._visible:
            logger.debug("Closing suggestion panel")
        self._visible = False

    def reveal(self) -> bool:
        """Reopen for a focused input, e.g. when results arrive after a submit."""
        if self._enabled and self._focused:
            self._open("host request")
        return self._visible

    def outside_interaction(self) -> None:
        """Handle a pointer or focus event outside the input and the panel."""
        self._focused = False
        self.close()

    def _open(self, reason: str) -> None:
        if not self._visible:
            logger.debug(f"Opening suggestion panel on {reason}")
        self._visible = True
