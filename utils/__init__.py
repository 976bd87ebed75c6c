"""
Utility functions for the NFC card scanner bridge.
"""

from .logging import Logger, get_logger

__all__ = ['Logger', 'get_logger']
