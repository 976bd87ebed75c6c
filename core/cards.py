"""
Playing card value types for the NFC card scanner bridge.

A scanned card is reported as a (suit, rank) pair. Codes stored in the
identifier table encode the suit in their first character and the rank
in their second.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Suit(str, Enum):
    CLUBS = "CLUBS"
    SPADES = "SPADES"
    DIAMONDS = "DIAMONDS"
    HEARTS = "HEARTS"
    UNKNOWN = "UNKNOWN"


class Rank(str, Enum):
    ACE = "ACE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"
    SIX = "SIX"
    SEVEN = "SEVEN"
    EIGHT = "EIGHT"
    NINE = "NINE"
    TEN = "TEN"
    JACK = "JACK"
    QUEEN = "QUEEN"
    KING = "KING"
    UNKNOWN = "UNKNOWN"


# First character of a code
SUIT_CODES: Dict[str, Suit] = {
    "1": Suit.CLUBS,
    "2": Suit.SPADES,
    "3": Suit.DIAMONDS,
    "4": Suit.HEARTS,
}

# Second character of a code
RANK_CODES: Dict[str, Rank] = {
    "1": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "A": Rank.TEN,
    "B": Rank.JACK,
    "C": Rank.QUEEN,
    "D": Rank.KING,
}


@dataclass(frozen=True)
class CardState:
    """The card currently detected on the reader."""
    suit: Suit = Suit.UNKNOWN
    rank: Rank = Rank.UNKNOWN

    @classmethod
    def unknown(cls) -> 'CardState':
        return cls(Suit.UNKNOWN, Rank.UNKNOWN)

    @classmethod
    def from_code(cls, code: str) -> 'CardState':
        """
        Interpret a two-character table code.

        Characters outside the known sets, or a code that is too short,
        give UNKNOWN for that field.
        """
        suit_char = code[0] if len(code) > 0 else ""
        rank_char = code[1] if len(code) > 1 else ""
        return cls(
            suit=SUIT_CODES.get(suit_char, Suit.UNKNOWN),
            rank=RANK_CODES.get(rank_char, Rank.UNKNOWN)
        )

    @property
    def is_known(self) -> bool:
        """True when both suit and rank were resolved."""
        return self.suit is not Suit.UNKNOWN and self.rank is not Rank.UNKNOWN

    def to_payload(self) -> Dict[str, str]:
        """JSON body sent to the game service."""
        return {"suit": self.suit.value, "rank": self.rank.value}

    def __str__(self) -> str:
        return f"{self.suit.value} {self.rank.value}"
