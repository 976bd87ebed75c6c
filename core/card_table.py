"""
Identifier table for the NFC card scanner bridge.

This module maps the tag identifiers reported by the reader to two-character
card codes (suit digit + rank digit). The built-in table covers the deck the
reader ships with; a JSON file may replace it at startup.
"""

import json
import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class CardTableError(Exception):
    """Raised when a card table file cannot be loaded."""
    pass


IDENTIFIER_TABLE: Mapping[str, str] = MappingProxyType({
    "4628F22E1791": "45",
    "4B132FA2E1790": "28",
    "49915F22E1790": "24",
    "4633CFA2E1790": "21",
    "41027F22E1791": "31",
    "4C131F22E1790": "19",
    "47025F22E1790": "4A",
    "4594AF22E1790": "3A",
    "4B1EF22E1790": "4D",
    "4201DFA2E1791": "23",
    "4C28F22E1791": "37",
    "43B48F22E1790": "4B",
    "4A3EFA2E1791": "42",
    "4E42BF22E1790": "11",
    "4231DF22E1791": "38",
    "4AA34FA2E1790": "17",
    "48317F22E1790": "1B",
    "46226F22E1790": "3C",
    "4A38FA2E1791": "43",
    "433DFA2E1791": "22",
    "44148F22E1790": "2C",
    "4171DFA2E1791": "13",
    "4F123F22E1790": "41",
    "4C937F22E1790": "35",
    "45B38F22E1790": "29",
    "45A2EF22E1790": "18",
    "48E20F22E1790": "46",
    "43F3DF22E1791": "3D",
    "4A935FA2E1790": "12",
    "48745F22E1790": "26",
    "41D1DF22E1791": "44",
    "4BF32F22E1790": "15",
    "49045F22E1790": "27",
    "4EF28F22E1790": "47",
    "4CD17F22E1790": "32",
    "48628F22E1790": "33",
    "44239F22E1790": "2A",
    "4B01FF22E1790": "34",
    "4201DF22E1791": "49",
    "4A318F22E1790": "48",
    "45C32FA2E1790": "16",
    "4153DFA2E1791": "25",
    "46D32FA2E1790": "14",
    "42B22F22E1791": "2B",
    "4B4AF22E1790": "3B",
    "48145F22E1790": "1A",
    "46F1FF22E1790": "36",
    "48816F22E1790": "2D",
    "44C4AF22E1790": "1C",
    "4162FF22E1791": "1D",
    "4494AF22E1790": "4C",
    "4FE28F22E1790": "39",
})


class CardTable:
    """
    Read-only identifier to code lookup.

    The mapping is frozen at construction and never changes afterwards.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None, source: str = "built-in"):
        if entries is None:
            entries = IDENTIFIER_TABLE
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))
        self.source = source

    @property
    def count(self) -> int:
        """Get number of known identifiers."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._entries

    def lookup(self, identifier: str) -> Optional[str]:
        """Return the code for an identifier, or None if it is not in the table."""
        return self._entries.get(identifier)

    def entries(self) -> Mapping[str, str]:
        return self._entries

    @classmethod
    def load_from_file(cls, filepath: str) -> 'CardTable':
        """
        Load a table from JSON.

        Accepts either a flat ``{"<identifier>": "<code>"}`` object or the
        same object nested under a ``"cards"`` key.

        Raises:
            CardTableError: If the file is missing or malformed
        """
        if not os.path.exists(filepath):
            raise CardTableError(f"Card table file not found: {filepath}")

        try:
            with open(filepath, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CardTableError(f"Error loading card table {filepath}: {e}")

        if isinstance(data, dict) and isinstance(data.get("cards"), dict):
            data = data["cards"]

        if not isinstance(data, dict):
            raise CardTableError(f"Card table {filepath} must be a JSON object")

        entries: Dict[str, str] = {}
        for identifier, code in data.items():
            if not isinstance(code, str):
                raise CardTableError(
                    f"Card table {filepath}: code for {identifier!r} must be a string"
                )
            key = str(identifier).strip().upper()
            if key:
                entries[key] = code.strip().upper()

        if not entries:
            raise CardTableError(f"Card table {filepath} has no entries")

        return cls(entries, source=filepath)

    def save(self, filepath: str):
        """Write the table to JSON under a "cards" key."""
        with open(filepath, "w") as f:
            json.dump({"cards": dict(self._entries)}, f, indent=4)
