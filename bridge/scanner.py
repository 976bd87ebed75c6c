"""
Scanner bridge for the NFC card scanner.

This module defines the read loop that turns frames from the reader into
scan notifications for the game service.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from core.debounce import DebounceFilter
from core.decoder import FrameDecoder
from core.frame_reader import FrameReader, FrameReadError, ReadTimeout
from core.notifier import ScanNotifier
from core.cards import CardState
from utils.logging import Logger, get_logger


@dataclass
class ScanStats:
    """Counters for one bridge run."""
    frames: int = 0
    dropped: int = 0
    unknown_ids: int = 0
    notifications: int = 0
    read_errors: int = 0


class ScannerBridge:
    """
    Read, decode, debounce and notify.

    The reader, decoder and debounce state are used only by the thread
    running run(); notifications are sent one at a time from that thread.
    """

    def __init__(
        self,
        reader: FrameReader,
        decoder: FrameDecoder,
        notifier: ScanNotifier,
        retry_delay: float = 0.1,
        logger: Optional[Logger] = None
    ):
        """
        Initialize bridge with required components.

        Args:
            reader: Opened FrameReader
            decoder: FrameDecoder backed by the identifier table
            notifier: ScanNotifier for the game endpoint
            retry_delay: Pause after a timeout or read error, in seconds
            logger: Logger instance (shared default if None)
        """
        self.reader = reader
        self.decoder = decoder
        self.notifier = notifier
        self.retry_delay = retry_delay
        self.log = logger or get_logger()

        self.debounce = DebounceFilter()
        self.stats = ScanStats()

        self._stop_requested = False
        self._thread: Optional[threading.Thread] = None
        self._on_scan_callback: Optional[Callable[[CardState, Optional[int]], None]] = None

    def set_on_scan_callback(self, callback: Callable[[CardState, Optional[int]], None]):
        """Set callback for sent notifications. Called with (state, status)."""
        self._on_scan_callback = callback

    @property
    def last_state(self) -> CardState:
        return self.debounce.last_state

    def process_frame(self, frame: bytes) -> bool:
        """
        Handle one frame.

        Returns:
            True if a notification was sent
        """
        self.stats.frames += 1
        state = self.decoder.decode(frame)
        if state is None:
            self.stats.unknown_ids += 1
            self.log.debug(f"Unknown identifier {self.decoder.identifier(frame)!r}")
            return False

        if not self.debounce.accept(state):
            return False

        self.log.info(f"Sending {state}")
        status = self.notifier.notify(state)
        self.stats.notifications += 1

        if self._on_scan_callback:
            self._on_scan_callback(state, status)
        return True

    def poll_once(self) -> bool:
        """
        Run one loop iteration.

        Returns:
            True if a notification was sent
        """
        try:
            frame = self.reader.poll()
        except ReadTimeout:
            time.sleep(self.retry_delay)
            return False
        except FrameReadError as e:
            self.stats.read_errors += 1
            self.log.error(f"Serial read error: {e}")
            time.sleep(self.retry_delay)
            return False

        if frame is None:
            self.stats.dropped += 1
            return False

        return self.process_frame(frame)

    def run(self):
        """Poll until stop() is called."""
        while not self._stop_requested:
            self.poll_once()

    def start(self) -> threading.Thread:
        """Run the loop on a background thread."""
        if self._thread is None or not self._thread.is_alive():
            self._stop_requested = False
            self._thread = threading.Thread(
                target=self.run,
                name="scanner-bridge",
                daemon=True
            )
            self._thread.start()
        return self._thread

    def stop(self):
        """Request the loop to stop after the current iteration."""
        self._stop_requested = True

    def join(self, timeout: Optional[float] = None):
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
