"""
Frame decoding for the NFC card scanner bridge.
"""

from typing import Optional

from .card_table import CardTable
from .cards import CardState


class FrameDecoder:
    """
    Turns raw frames into card states.

    A frame is the tag identifier in ASCII followed by two trailing
    bytes that are not validated.
    """

    TRAILER_LENGTH = 2

    def __init__(self, table: Optional[CardTable] = None):
        self.table = table or CardTable()

    @classmethod
    def identifier(cls, frame: bytes) -> str:
        """Recover the identifier by dropping the trailing bytes."""
        return frame[:-cls.TRAILER_LENGTH].decode("ascii", errors="replace")

    def lookup(self, identifier: str) -> Optional[str]:
        return self.table.lookup(identifier)

    @staticmethod
    def card_from_code(code: str) -> CardState:
        return CardState.from_code(code)

    def decode(self, frame: bytes) -> Optional[CardState]:
        """
        Decode a frame.

        Returns:
            The card state (possibly with UNKNOWN fields), or None if the
            identifier is not in the table
        """
        code = self.lookup(self.identifier(frame))
        if code is None:
            return None
        return self.card_from_code(code)
