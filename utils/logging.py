"""
Logging utilities for the NFC card scanner bridge.
"""

import sys
from datetime import datetime
from typing import Optional, Callable


LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class Logger:
    """
    Simple console logger with level filtering and callback support.
    """

    def __init__(
        self,
        callback: Optional[Callable[[str], None]] = None,
        level: str = "INFO",
        history: int = 500
    ):
        """
        Initialize logger.

        Args:
            callback: Optional callback for formatted log messages
            level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR)
            history: Number of messages kept in memory
        """
        self._callback = callback
        self._messages = []
        self._history = history
        self._level = LEVELS["INFO"]
        self.set_level(level)

    def set_callback(self, callback: Callable[[str], None]):
        """Set callback for log messages."""
        self._callback = callback

    def set_level(self, level: str):
        """Set the minimum level; unknown names fall back to INFO."""
        self._level = LEVELS.get(str(level).upper(), LEVELS["INFO"])

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS.get(level, 0) >= self._level

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message.

        Args:
            message: Log message
            level: Log level (DEBUG, INFO, WARNING, ERROR)
        """
        if not self.is_enabled_for(level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        formatted = f"[{timestamp}] [{level}] {message}"

        self._messages.append(formatted)
        if len(self._messages) > self._history:
            del self._messages[:-self._history]

        stream = sys.stderr if level == "ERROR" else sys.stdout
        print(formatted, file=stream, flush=True)

        if self._callback:
            self._callback(formatted)

    def debug(self, message: str):
        self.log(message, "DEBUG")

    def info(self, message: str):
        """Log info message."""
        self.log(message, "INFO")

    def warning(self, message: str):
        """Log warning message."""
        self.log(message, "WARNING")

    def error(self, message: str):
        """Log error message."""
        self.log(message, "ERROR")

    def get_messages(self, count: int = 100) -> list:
        """Get recent log messages."""
        return self._messages[-count:]

    def clear(self):
        """Clear log messages."""
        self._messages = []


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger shared by all components."""
    return _default_logger
