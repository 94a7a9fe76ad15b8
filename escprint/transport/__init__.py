from __future__ import annotations

from typing import Any, Protocol

from .buffer import FrameBuffer
from .serial import SERIAL_BAUD_RATE, SerialTransport
from .stream import StreamTransport


class Sink(Protocol):
    """Anything that accepts raw printer bytes."""

    def write(self, data: bytes) -> Any:
        ...


__all__ = ["FrameBuffer", "SERIAL_BAUD_RATE", "SerialTransport", "Sink", "StreamTransport"]
