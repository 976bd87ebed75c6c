"""
Settings and configuration management for the NFC card scanner bridge.

This module provides centralized configuration with dataclasses for
serial settings, game service settings, and application-wide settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import json
import os

from core.notifier import build_endpoint
from utils.logging import get_logger


@dataclass
class SerialSettings:
    """NFC reader serial configuration settings."""
    port: Optional[str] = "/dev/ttyUSB0"
    baud_rate: int = 115200
    timeout: float = 0.1
    retry_delay: float = 0.1
    read_size: int = 1024

    # Tried in order when no port is set
    preferred_ports: List[str] = field(default_factory=lambda: [
        "/dev/ttyUSB0",
        "/dev/ttyUSB1",
        "/dev/ttyACM0",
        "COM3",
        "COM4"
    ])


@dataclass
class ServiceSettings:
    """Game service configuration settings."""
    base_url: str = ""
    game: str = ""
    request_timeout: float = 10.0

    @property
    def endpoint(self) -> str:
        return build_endpoint(self.base_url, self.game)


@dataclass
class Settings:
    """Main application settings container."""
    serial: SerialSettings = field(default_factory=SerialSettings)
    service: ServiceSettings = field(default_factory=ServiceSettings)

    # Paths
    card_table_file: Optional[str] = None

    keepalive_interval: float = 60.0
    log_level: str = "INFO"

    # Application info
    app_name: str = "NFC Card Scanner"
    version: str = "1.0.0"

    def save_to_file(self, filepath: str = "scanner_settings.json"):
        """Save current settings to JSON file."""
        data = {
            "serial": {
                "port": self.serial.port,
                "baud_rate": self.serial.baud_rate,
                "timeout": self.serial.timeout,
                "retry_delay": self.serial.retry_delay,
                "read_size": self.serial.read_size
            },
            "service": {
                "base_url": self.service.base_url,
                "game": self.service.game,
                "request_timeout": self.service.request_timeout
            },
            "paths": {
                "card_table_file": self.card_table_file
            },
            "keepalive_interval": self.keepalive_interval,
            "log_level": self.log_level
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "scanner_settings.json") -> 'Settings':
        """Load settings from JSON file."""
        settings = cls()

        if not os.path.exists(filepath):
            return settings

        try:
            with open(filepath, 'r') as f:
                data = json.load(f)

            if "serial" in data:
                for key, value in data["serial"].items():
                    if hasattr(settings.serial, key):
                        setattr(settings.serial, key, value)

            if "service" in data:
                for key, value in data["service"].items():
                    if key != "endpoint" and hasattr(settings.service, key):
                        setattr(settings.service, key, value)

            if "paths" in data:
                settings.card_table_file = data["paths"].get(
                    "card_table_file", settings.card_table_file
                )

            settings.keepalive_interval = data.get(
                "keepalive_interval", settings.keepalive_interval
            )
            settings.log_level = data.get("log_level", settings.log_level)

        except (OSError, ValueError, AttributeError) as e:
            get_logger().error(f"Error loading settings from {filepath}: {e}")
            return cls()

        return settings
