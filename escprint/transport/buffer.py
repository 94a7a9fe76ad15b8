from __future__ import annotations

from typing import List


class FrameBuffer:
    """In-memory sink that keeps every written frame.

    Lets a whole job be built and validated before a real printer is opened.
    """

    def __init__(self) -> None:
        self.frames: List[bytes] = []

    def write(self, data: bytes) -> int:
        self.frames.append(bytes(data))
        return len(data)

    @property
    def data(self) -> bytes:
        return b"".join(self.frames)

    def __len__(self) -> int:
        return len(self.frames)
