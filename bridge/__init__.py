"""
Bridge module for the NFC card scanner.

This module contains the loop connecting the reader to the game service.
"""

from .scanner import ScannerBridge, ScanStats

__all__ = [
    'ScannerBridge',
    'ScanStats'
]
