"""
Command-line interface for the NFC card scanner bridge.
"""

from .app import main

__all__ = ['main']
