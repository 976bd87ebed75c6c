"""
Frame Reader for the NFC card scanner bridge.

This module provides the FrameReader class for serial communication
with the NFC reader that reports tag identifiers as ASCII frames.
"""

import serial
import serial.tools.list_ports
from typing import Optional, List

from utils.logging import Logger, get_logger


class FrameReaderError(Exception):
    """Base exception for frame reader errors."""
    pass


class FrameReaderConnectionError(FrameReaderError):
    """Raised when the serial device cannot be opened."""
    pass


class FrameReadError(FrameReaderError):
    """Raised when a read fails for any reason other than a timeout."""
    pass


class ReadTimeout(FrameReaderError):
    """Raised when a poll returns no data within the read timeout."""
    pass


class FrameReader:
    """
    Reader for identifier frames via serial connection.

    This class provides:
    - Automatic port detection with priority ordering
    - Connection management
    - Polling with extraction of fixed-length frames
    """

    # Identifier plus two trailing bytes; the reader emits both lengths
    FRAME_LENGTHS = (14, 15)

    PREFERRED_PORTS = [
        "/dev/ttyUSB0",
        "/dev/ttyUSB1",
        "/dev/ttyACM0",
        "COM3",
        "COM4"
    ]

    def __init__(
        self,
        port: Optional[str] = None,
        baud_rate: int = 115200,
        timeout: float = 0.1,
        read_size: int = 1024,
        preferred_ports: Optional[List[str]] = None,
        logger: Optional[Logger] = None
    ):
        """
        Initialize frame reader.

        Args:
            port: Serial port (auto-detect if None)
            baud_rate: Serial baud rate
            timeout: Read timeout in seconds
            read_size: Maximum bytes requested per read
            preferred_ports: Ports tried first when auto-detecting
            logger: Logger instance (shared default if None)
        """
        self.port = port
        self.baud_rate = baud_rate
        self.timeout = timeout
        self.read_size = read_size
        self.preferred_ports = preferred_ports or list(self.PREFERRED_PORTS)
        self.log = logger or get_logger()

        self._serial: Optional[serial.Serial] = None

    @property
    def is_connected(self) -> bool:
        """Check if the serial device is open."""
        return self._serial is not None and self._serial.is_open

    @staticmethod
    def list_ports() -> List[str]:
        """List all available serial ports."""
        return [p.device for p in serial.tools.list_ports.comports()]

    @classmethod
    def find_preferred_port(
        cls,
        available_ports: Optional[List[str]] = None,
        preferred_ports: Optional[List[str]] = None
    ) -> Optional[str]:
        """
        Find the preferred reader port from available ports.

        Args:
            available_ports: List of available ports (auto-detect if None)
            preferred_ports: Priority list (class default if None)

        Returns:
            Preferred port or first available, None if no ports
        """
        if available_ports is None:
            available_ports = cls.list_ports()

        if not available_ports:
            return None

        for preferred in preferred_ports or cls.PREFERRED_PORTS:
            if preferred in available_ports:
                return preferred

        # USB serial adapters enumerate with varying numbers
        for port in available_ports:
            if "ttyUSB" in port or "usbserial" in port:
                return port

        return available_ports[0]

    def connect(self, port: Optional[str] = None) -> bool:
        """
        Open the serial device.

        Args:
            port: Serial port (uses stored port or auto-detect if None)

        Returns:
            True if connection successful

        Raises:
            FrameReaderConnectionError: If the device cannot be opened
        """
        if port:
            self.port = port
        elif self.port is None:
            self.port = self.find_preferred_port(preferred_ports=self.preferred_ports)

        if self.port is None:
            raise FrameReaderConnectionError("No serial port detected/selected")

        self.log.info(f"Attempting to open serial port: {self.port}")
        try:
            self._serial = serial.Serial(
                self.port,
                self.baud_rate,
                timeout=self.timeout
            )
        except (serial.SerialException, OSError, ValueError) as e:
            raise FrameReaderConnectionError(f"Failed to open serial port: {e}")

        self.log.info(f"Serial port opened successfully. Baud rate: {self.baud_rate}")
        return True

    def attach(self, device) -> None:
        """Use an already-open serial-like device instead of opening one."""
        self._serial = device

    def disconnect(self):
        """Close the serial device."""
        if self._serial is not None:
            try:
                self._serial.close()
                self.log.info("Serial port closed")
            except (serial.SerialException, OSError) as e:
                self.log.error(f"Disconnect error: {e}")

        self._serial = None

    def read_chunk(self) -> bytes:
        """
        Wait for the first byte, then take whatever is already buffered.

        Returns:
            Bytes read (empty on timeout)

        Raises:
            FrameReadError: If the device is closed or the read fails
        """
        if self._serial is None:
            raise FrameReadError("Serial port not open")

        try:
            chunk = bytes(self._serial.read(1))
            if chunk:
                waiting = min(self._serial.in_waiting, self.read_size - 1)
                if waiting > 0:
                    chunk += bytes(self._serial.read(waiting))
            return chunk
        except (serial.SerialException, OSError) as e:
            raise FrameReadError(str(e))

    @classmethod
    def extract_frame(cls, chunk: bytes) -> Optional[bytes]:
        """Return chunk if it is exactly one frame long, else None."""
        if len(chunk) in cls.FRAME_LENGTHS:
            return chunk
        return None

    def poll(self) -> Optional[bytes]:
        """
        Poll the device once.

        Returns:
            One frame, or None if the read did not have a frame length

        Raises:
            ReadTimeout: If nothing arrived within the timeout
            FrameReadError: If the read failed
        """
        chunk = self.read_chunk()
        if not chunk:
            raise ReadTimeout()

        frame = self.extract_frame(chunk)
        if frame is None:
            self.log.debug(f"Dropped {len(chunk)}-byte read: {chunk!r}")
        return frame
