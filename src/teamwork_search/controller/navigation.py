"""Keyboard cursor over the capped suggestion list."""

from __future__ import annotations

from .base import NO_SELECTION


class NavigationState:
    """Tracks the active suggestion under arrow-key movement.

    States are NO_SELECTION or an index into the capped list. Both
    directions wrap around. Pointer hover never touches this state.
    """

    def __init__(self) -> None:
        self._index = NO_SELECTION

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_selected(self) -> bool:
        return self._index != NO_SELECTION

    def move_down(self, count: int) -> int:
        """Move to the next suggestion, wrapping to the first.

        Args:
            count: Length of the capped list

        Returns:
            The new index
        """
        if count <= 0:
            self._index = NO_SELECTION
        elif self._index == NO_SELECTION or self._index >= count - 1:
            self._index = 0
        else:
            self._index += 1
        return self._index

    def move_up(self, count: int) -> int:
        """Move to the previous suggestion, wrapping to the last."""
        if count <= 0:
            self._index = NO_SELECTION
        elif self._index <= 0 or self._index > count - 1:
            self._index = count - 1
        else:
            self._index -= 1
        return self._index

    def reset(self) -> None:
        self._index = NO_SELECTION
