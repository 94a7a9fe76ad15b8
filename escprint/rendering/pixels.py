from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional

from PIL import Image


class Pixel(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


WHITE = Pixel(255, 255, 255, 255)
BLACK = Pixel(0, 0, 0, 255)


class PixelBuffer:
    """Fixed-size, row-major grid of RGBA pixels."""

    def __init__(self, width: int, height: int, pixels: Optional[List[Pixel]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("Buffer dimensions must not be negative")
        if pixels is None:
            pixels = [WHITE] * (width * height)
        if len(pixels) != width * height:
            raise ValueError("Pixels length must equal width * height")
        self._width = width
        self._height = height
        self._pixels = list(pixels)

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        """Load every pixel of a decoded image as 8-bit RGBA."""
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        data = img.tobytes()
        pixels = [Pixel(*data[i : i + 4]) for i in range(0, len(data), 4)]
        return cls(img.width, img.height, pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __getitem__(self, pos) -> Pixel:
        x, y = pos
        return self._pixels[self._index(x, y)]

    def __setitem__(self, pos, pixel: Pixel) -> None:
        x, y = pos
        self._pixels[self._index(x, y)] = Pixel(*pixel)

    def row(self, y: int) -> List[Pixel]:
        if not 0 <= y < self._height:
            raise IndexError(f"Row {y} out of range")
        start = y * self._width
        return self._pixels[start : start + self._width]

    def replace_all(self, func) -> None:
        """Replace every pixel in place with ``func(pixel)``."""
        self._pixels = [func(pixel) for pixel in self._pixels]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) out of range")
        return y * self._width + x
