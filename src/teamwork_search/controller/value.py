"""Value reconciliation between host-owned and internally typed text."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ValueReconciler:
    """Owns the authoritative text of one input.

    Controlled mode (an external value was supplied at construction):
    the host owns the text. ``set_value`` only notifies the host, and the
    reconciler re-adopts whatever the host pushes through ``sync_external``.

    Uncontrolled mode: ``set_value`` updates the text immediately and
    notifies the host; whatever the callback returns is ignored.

    The mode is fixed for the reconciler's lifetime.
    """

    def __init__(
        self,
        external_value: str | None = None,
        initial_value: str = "",
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the reconciler.

        Args:
            external_value: Host-supplied value; makes the input controlled
            initial_value: Start value for uncontrolled inputs
            on_change: Host notification for every requested change
        """
        self._controlled = external_value is not None
        self._value = external_value if external_value is not None else initial_value
        self._on_change = on_change

    @property
    def controlled(self) -> bool:
        return self._controlled

    def current_value(self) -> str:
        return self._value

    def set_value(self, text: str) -> None:
        """Request a new value and notify the host."""
        if not self._controlled:
            self._value = text
        if self._on_change:
            self._on_change(text)

    def sync_external(self, value: str | None) -> bool:
        """Adopt a value pushed by the host.

        Only adopts when it differs from the current value, so pushing back
        the text the user just typed does not loop.

        Returns:
            True if the current value changed
        """
        if value is None or value == self._value:
            return False
        logger.debug(f"Adopting host value {value!r} (was {self._value!r})")
        self._value = value
        return True
