from __future__ import annotations

import operator
from dataclasses import dataclass, field, replace
from enum import IntEnum

from ..errors import ValidationError

ESC = 0x1B
GS = 0x1D
FS = 0x1C

MAX_SIZE_MULTIPLIER = 5


class Justify(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class BarcodeKind(IntEnum):
    UPC_A = 0
    UPC_E = 1
    EAN13 = 2
    EAN8 = 3


class QRModel(IntEnum):
    MODEL_1 = 49
    MODEL_2 = 50


class QRErrorCorrection(IntEnum):
    L = 48
    M = 49
    Q = 50
    H = 51


class HRIPosition(IntEnum):
    NONE = 0
    ABOVE = 1
    BELOW = 2
    BOTH = 3


class RasterMode(IntEnum):
    NORMAL = 0
    DOUBLE_WIDTH = 1
    DOUBLE_HEIGHT = 2
    QUADRUPLE = 3


def as_int(value, name: str = "parameter") -> int:
    """Return value as an int, rejecting floats and other non-integers."""
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ValidationError(f"{name} must be an integer, got {value!r}") from exc


def clamp_size(value: int) -> int:
    """Clamp a character size multiplier into 1..5."""
    return max(1, min(MAX_SIZE_MULTIPLIER, as_int(value, "size multiplier")))


@dataclass(frozen=True)
class Style:
    """Text formatting applied to every text write.

    Instances are values: use :meth:`replace` or :meth:`sized` to derive a
    new style instead of mutating one.
    """

    bold: bool = False
    reverse: bool = False
    underline: int = 0
    upside_down: bool = False
    rotate: bool = False
    justify: Justify = Justify.LEFT
    width: int = 1
    height: int = 1

    def __post_init__(self) -> None:
        if as_int(self.underline, "underline") not in (0, 1, 2):
            raise ValidationError(f"Underline must be 0, 1 or 2, got {self.underline}")
        try:
            justify = Justify(self.justify)
        except ValueError as exc:
            raise ValidationError(f"Unknown justification: {self.justify}") from exc
        object.__setattr__(self, "underline", as_int(self.underline))
        object.__setattr__(self, "justify", justify)
        object.__setattr__(self, "width", clamp_size(self.width))
        object.__setattr__(self, "height", clamp_size(self.height))

    def replace(self, **changes) -> "Style":
        """Return a copy of the style with the given fields changed."""
        return replace(self, **changes)

    def sized(self, width: int, height: int) -> "Style":
        """Return a copy with new character multipliers, clamped to 1..5."""
        return replace(self, width=width, height=height)

    @property
    def size_byte(self) -> int:
        return ((self.width - 1) << 4) | (self.height - 1)


@dataclass(frozen=True)
class RasterPlane:
    """Packed 1-bit image, row-major, MSB first, black pixels set."""

    data: bytes = field(repr=False)
    width: int
    height: int

    def validate(self) -> None:
        """Validate dimensions for the raster image command."""
        if self.width < 0 or self.height < 0:
            raise ValidationError("Raster dimensions must not be negative")
        if self.width % 8 != 0:
            raise ValidationError("Raster width must be a multiple of 8")
        if self.height % 8 != 0:
            raise ValidationError("Raster height must be a multiple of 8")
        if len(self.data) != self.width_bytes * self.height:
            raise ValidationError(
                f"Raster data is {len(self.data)} bytes, expected {self.width_bytes * self.height}"
            )

    @property
    def width_bytes(self) -> int:
        """Return the width expressed in byte columns."""
        return self.width >> 3

    def to_image(self):
        """Return the plane as a Pillow mode "1" image (black where bits are set)."""
        from PIL import Image

        self.validate()
        # "1;I" unpacks set bits as black
        return Image.frombytes("1", (self.width, self.height), self.data, "raw", "1;I")
