"""Shared fixtures for escprint tests."""

from typing import List

import pytest
import serial
from PIL import Image


class RecordingSink:
    """Sink that keeps every frame it was given."""

    def __init__(self) -> None:
        self.frames: List[bytes] = []

    def write(self, data: bytes) -> int:
        self.frames.append(bytes(data))
        return len(data)

    @property
    def data(self) -> bytes:
        return b"".join(self.frames)


class FailingSink(RecordingSink):
    """Sink that raises OSError on the write numbered ``fail_on`` (0-based)."""

    def __init__(self, fail_on: int = 0) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.calls = 0

    def write(self, data: bytes) -> int:
        call = self.calls
        self.calls += 1
        if call == self.fail_on:
            raise OSError("device unplugged")
        return super().write(data)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_image():
    """Factory for solid RGBA images."""

    def factory(width, height, color=(0, 0, 0, 255)):
        return Image.new("RGBA", (width, height), color)

    return factory


@pytest.fixture
def failing_sink():
    """Factory for sinks that raise OSError on a chosen write."""

    def factory(fail_on=0):
        return FailingSink(fail_on)

    return factory


class FakeSerial:
    """Stand-in for serial.Serial that records writes."""

    instances = []

    def __init__(self, port, baudrate, timeout=None, write_timeout=None):
        self.port = port
        self.baudrate = baudrate
        self.chunks = []
        self.flushed = 0
        self.closed = False
        FakeSerial.instances.append(self)

    def write(self, data):
        self.chunks.append(bytes(data))
        return len(data)

    def flush(self):
        self.flushed += 1

    def close(self):
        self.closed = True


@pytest.fixture
def fake_serial(monkeypatch):
    """Replace serial.Serial with FakeSerial and return the fake class."""
    FakeSerial.instances = []
    monkeypatch.setattr(serial, "Serial", FakeSerial)
    return FakeSerial
