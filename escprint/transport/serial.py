from __future__ import annotations

import logging
import time
from typing import Optional

from ..errors import TransportError

SERIAL_BAUD_RATE = 9600

logger = logging.getLogger(__name__)


class SerialTransport:
    """Blocking byte sink over a serial port."""

    def __init__(
        self,
        port: str,
        baud_rate: int = SERIAL_BAUD_RATE,
        chunk_size: Optional[int] = None,
        interval_ms: int = 0,
        timeout: float = 1.0,
    ) -> None:
        self._port = port
        self._baud_rate = baud_rate
        self._chunk_size = chunk_size
        self._interval_ms = interval_ms
        self._timeout = timeout
        self._serial = None

    @property
    def is_open(self) -> bool:
        return self._serial is not None

    def open(self) -> None:
        if self._serial is not None:
            return
        try:
            import serial
        except Exception as exc:  # pragma: no cover
            raise TransportError("pyserial is required. Install with: pip install pyserial") from exc
        try:
            self._serial = serial.Serial(
                self._port, self._baud_rate, timeout=self._timeout, write_timeout=5
            )
        except Exception as exc:
            raise TransportError(f"Serial connection failed: {exc}") from exc
        logger.info("Opened serial port %s at %d baud", self._port, self._baud_rate)

    def close(self) -> None:
        if self._serial is None:
            return
        try:
            self._serial.close()
        finally:
            self._serial = None
            logger.debug("Closed serial port %s", self._port)

    def write(self, data: bytes) -> int:
        if self._serial is None:
            self.open()
        chunk_size = self._chunk_size or len(data) or 1
        interval = max(0.0, self._interval_ms / 1000.0)
        try:
            offset = 0
            while offset < len(data):
                chunk = data[offset : offset + chunk_size]
                self._serial.write(chunk)
                offset += len(chunk)
                if interval and offset < len(data):
                    time.sleep(interval)
            self._serial.flush()
        except Exception as exc:
            raise TransportError(f"Serial write failed: {exc}") from exc
        return len(data)

    def __enter__(self) -> "SerialTransport":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
