"""
Core module for the NFC card scanner bridge.

This module contains the device and service layer:
- Card value types and the identifier table
- Serial frame reader
- Frame decoder and debounce filter
- HTTP scan notifier
"""

from .cards import CardState, Suit, Rank
from .card_table import CardTable, CardTableError, IDENTIFIER_TABLE
from .frame_reader import (
    FrameReader,
    FrameReaderError,
    FrameReaderConnectionError,
    FrameReadError,
    ReadTimeout
)
from .decoder import FrameDecoder
from .debounce import DebounceFilter
from .notifier import ScanNotifier, build_endpoint

__all__ = [
    'CardState',
    'Suit',
    'Rank',
    'CardTable',
    'CardTableError',
    'IDENTIFIER_TABLE',
    'FrameReader',
    'FrameReaderError',
    'FrameReaderConnectionError',
    'FrameReadError',
    'ReadTimeout',
    'FrameDecoder',
    'DebounceFilter',
    'ScanNotifier',
    'build_endpoint'
]
