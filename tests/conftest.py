import os
import sys

import pytest
import requests
import serial

# Packages live at the repository root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from utils.logging import Logger  # noqa: E402


class FakeSerial:
    """
    Serial stand-in fed with scripted bursts.

    Each burst lands in the input buffer when the buffer is empty and a
    read is made; b"" models a timeout and exceptions are raised.
    """

    def __init__(self, reads=None):
        self.reads = list(reads or [])
        self.is_open = True
        self.read_sizes = []
        self._buffer = b""

    @property
    def in_waiting(self):
        return len(self._buffer)

    def read(self, size=1):
        self.read_sizes.append(size)
        if not self._buffer:
            if not self.reads:
                return b""
            item = self.reads.pop(0)
            if isinstance(item, Exception):
                raise item
            self._buffer = item
        data, self._buffer = self._buffer[:size], self._buffer[size:]
        return data

    def close(self):
        self.is_open = False


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """requests.Session stand-in recording every POST."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.posts = []
        self.closed = False

    def post(self, url, json=None, timeout=None):
        self.posts.append({"url": url, "json": json, "timeout": timeout})
        if self.responses:
            item = self.responses.pop(0)
        else:
            item = FakeResponse(200)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


def frame(identifier, trailer=b"\r\n"):
    return identifier.encode("ascii") + trailer


@pytest.fixture
def logger():
    return Logger(level="DEBUG")


@pytest.fixture
def fake_serial():
    return FakeSerial()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def serial_error():
    return serial.SerialException("device reports readiness to read but returned no data")


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
