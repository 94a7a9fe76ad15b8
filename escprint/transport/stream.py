from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from ..errors import TransportError

logger = logging.getLogger(__name__)


class StreamTransport:
    """Byte sink over a binary file object or a device/file path.

    A transport built from a path owns the file and closes it; a transport
    built around an existing stream leaves it open.
    """

    def __init__(self, stream: Optional[BinaryIO] = None, path: Optional[str] = None) -> None:
        if (stream is None) == (path is None):
            raise ValueError("Provide either a stream or a path")
        self._stream = stream
        self._path = path
        self._owned = path is not None

    def open(self) -> None:
        if self._stream is not None:
            return
        try:
            self._stream = open(self._path, "wb")
        except OSError as exc:
            raise TransportError(f"Cannot open {self._path}: {exc}") from exc
        logger.info("Opened %s for writing", self._path)

    def close(self) -> None:
        if self._owned and self._stream is not None:
            try:
                self._stream.close()
            finally:
                self._stream = None
                logger.debug("Closed %s", self._path)

    def write(self, data: bytes) -> int:
        if self._stream is None:
            self.open()
        try:
            self._stream.write(data)
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise TransportError(f"Write failed: {exc}") from exc
        return len(data)

    def __enter__(self) -> "StreamTransport":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
