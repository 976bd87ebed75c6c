"""
Configuration module for the NFC card scanner bridge.
"""

from .settings import Settings, SerialSettings, ServiceSettings

__all__ = ['Settings', 'SerialSettings', 'ServiceSettings']
