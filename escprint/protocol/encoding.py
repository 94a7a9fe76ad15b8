from __future__ import annotations

from typing import List, Sequence

from ..errors import ValidationError
from .types import RasterPlane


def print_dimension(value: int) -> int:
    """Round a pixel dimension down to the nearest multiple of 8."""
    return (value // 8) * 8


def pack_line(line: Sequence[int]) -> bytes:
    """Pack a line of 0/1 values into bytes, leftmost pixel in the MSB.

    The line length must be a multiple of 8.
    """
    out = bytearray()
    for i in range(0, len(line), 8):
        value = 0
        for bit, pix in enumerate(line[i : i + 8]):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def rasterize(buffer, print_width: int, print_height: int) -> RasterPlane:
    """Pack a thresholded pixel buffer into a raster plane.

    Only the top-left ``print_width`` x ``print_height`` region is packed.
    A pixel is printed (bit set) when its red channel is 0.
    """
    if print_width % 8 != 0:
        raise ValidationError("print width must be a multiple of 8")
    if print_height % 8 != 0:
        raise ValidationError("print height must be a multiple of 8")
    if print_width < 0 or print_height < 0:
        raise ValidationError("print dimensions must not be negative")
    if print_width > buffer.width or print_height > buffer.height:
        raise ValidationError(
            f"print area {print_width}x{print_height} exceeds image {buffer.width}x{buffer.height}"
        )
    out = bytearray()
    for y in range(print_height):
        row = buffer.row(y)
        line: List[int] = [1 if pixel.r == 0 else 0 for pixel in row[:print_width]]
        out += pack_line(line)
    return RasterPlane(bytes(out), print_width, print_height)
