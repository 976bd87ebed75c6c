"""
Debounce filter for decoded card states.
"""

from typing import Optional

from .cards import CardState


class DebounceFilter:
    """
    Suppresses repeated notifications for an unchanged card.

    Only fully known states are remembered; an unknown or partial decode
    never replaces the last accepted card.
    """

    def __init__(self):
        self._last = CardState.unknown()

    @property
    def last_state(self) -> CardState:
        """Last accepted card state."""
        return self._last

    def accept(self, state: Optional[CardState]) -> bool:
        """
        Decide whether a decoded state warrants a notification.

        An accepted state becomes the remembered state immediately, before
        any notification is attempted.

        Returns:
            True if the state is known and differs from the remembered one
        """
        if state is None or not state.is_known:
            return False
        if state == self._last:
            return False
        self._last = state
        return True

    def reset(self):
        """Forget the remembered state."""
        self._last = CardState.unknown()
