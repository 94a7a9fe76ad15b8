from __future__ import annotations

from typing import Dict, List, Tuple, Union

from ..errors import ValidationError
from .types import (
    ESC,
    FS,
    GS,
    BarcodeKind,
    HRIPosition,
    Justify,
    QRErrorCorrection,
    QRModel,
    RasterMode,
    RasterPlane,
    Style,
    as_int,
    clamp_size,
)

BARCODE_LENGTHS: Dict[BarcodeKind, Tuple[int, ...]] = {
    BarcodeKind.UPC_A: (11, 12),
    BarcodeKind.UPC_E: (11, 12),
    BarcodeKind.EAN13: (12, 13),
    BarcodeKind.EAN8: (7, 8),
}

# pL/pH of the QR store command cover the payload plus three fixed bytes
QR_STORE_OVERHEAD = 3
QR_MAX_PAYLOAD = 7089
MAX_LENGTH_FIELD = 0xFFFF


def split_length(value: int) -> Tuple[int, int]:
    """Split a two-byte length field into its (low, high) bytes."""
    if value < 0 or value > MAX_LENGTH_FIELD:
        raise ValidationError(f"Length field out of range: {value}")
    return value % 256, value // 256


def param_byte(value: int, name: str = "parameter") -> int:
    """Return value as a single command parameter byte."""
    value = as_int(value, name)
    if value < 0 or value > 0xFF:
        raise ValidationError(f"{name} must be between 0 and 255, got {value}")
    return value


def flag_byte(value: bool) -> int:
    """Encode a boolean as ASCII '0' or '1'."""
    return 0x31 if value else 0x30


def bold_cmd(on: bool) -> bytes:
    """Build the bold on/off command."""
    return bytes([ESC, ord("E"), flag_byte(on)])


def underline_cmd(level: int) -> bytes:
    """Build the underline command; level is the thickness in dots (0-2)."""
    level = as_int(level, "underline")
    if level not in (0, 1, 2):
        raise ValidationError(f"Underline must be 0, 1 or 2, got {level}")
    return bytes([ESC, ord("-"), level])


def reverse_cmd(on: bool) -> bytes:
    """Build the white-on-black (reverse) command."""
    return bytes([GS, ord("B"), flag_byte(on)])


def rotate_cmd(on: bool) -> bytes:
    """Build the 90 degree clockwise rotation command."""
    return bytes([ESC, ord("V"), flag_byte(on)])


def upside_down_cmd(on: bool) -> bytes:
    """Build the upside-down printing command."""
    return bytes([ESC, ord("{"), flag_byte(on)])


def justify_cmd(justify: Union[Justify, int]) -> bytes:
    """Build the justification command (left, center or right)."""
    try:
        value = Justify(justify)
    except ValueError as exc:
        raise ValidationError(f"Unknown justification: {justify}") from exc
    return bytes([ESC, ord("a"), int(value)])


def size_cmd(width: int, height: int) -> bytes:
    """Build the character size command from 1-5 multipliers."""
    packed = ((clamp_size(width) - 1) << 4) | (clamp_size(height) - 1)
    return bytes([GS, ord("!"), packed])


def style_cmds(style: Style) -> List[bytes]:
    """Return the frames that put the printer into the given style."""
    return [
        bold_cmd(style.bold),
        underline_cmd(style.underline),
        reverse_cmd(style.reverse),
        rotate_cmd(style.rotate),
        upside_down_cmd(style.upside_down),
        justify_cmd(style.justify),
        size_cmd(style.width, style.height),
    ]


def text_frames(style: Style, data: bytes) -> List[bytes]:
    """Return the style frames followed by the already encoded text."""
    frames = style_cmds(style)
    if data:
        frames.append(bytes(data))
    return frames


def validate_barcode(kind: Union[BarcodeKind, int], code: str) -> BarcodeKind:
    """Check the code length and digits for the barcode kind."""
    try:
        kind = BarcodeKind(kind)
    except ValueError as exc:
        raise ValidationError(f"Unsupported barcode kind: {kind}") from exc
    lengths = BARCODE_LENGTHS[kind]
    if len(code) not in lengths:
        raise ValidationError(
            f"{kind.name} code should have a length of {' or '.join(str(n) for n in lengths)}"
        )
    if not all("0" <= char <= "9" for char in code):
        raise ValidationError("code can only contain numerical characters")
    return kind


def barcode_cmd(kind: Union[BarcodeKind, int], code: str) -> bytes:
    """Build a GS k barcode frame terminated by NUL."""
    kind = validate_barcode(kind, code)
    return bytes([GS, ord("k"), int(kind)]) + code.encode("ascii") + b"\x00"


def hri_position_cmd(position: Union[HRIPosition, int]) -> bytes:
    """Build the HRI position command; unknown positions fall back to none."""
    position = as_int(position, "HRI position")
    if position < HRIPosition.NONE or position > HRIPosition.BOTH:
        position = HRIPosition.NONE
    return bytes([GS, ord("H"), position])


def hri_font_cmd(font_b: bool) -> bytes:
    """Build the HRI font command (font A when false, font B when true)."""
    return bytes([GS, ord("f"), flag_byte(font_b)])


def barcode_height_cmd(dots: int) -> bytes:
    """Build the barcode height command."""
    return bytes([GS, ord("h"), param_byte(dots, "barcode height")])


def barcode_width_cmd(width: int) -> bytes:
    """Build the barcode module width command, clamped to 2..6."""
    width = max(2, min(6, as_int(width, "barcode width")))
    return bytes([GS, ord("w"), width])


def _qr_function(*params: int) -> bytes:
    """Build a GS ( k QR function frame."""
    return bytes([GS, ord("("), ord("k"), *params])


def qr_code_cmds(
    data: Union[str, bytes],
    model: bool = True,
    size: int = 3,
    correction: Union[QRErrorCorrection, int] = QRErrorCorrection.L,
) -> List[bytes]:
    """Build the five frames that store and print a QR code.

    ``model`` selects model 2 when true and model 1 otherwise. The error
    correction level is clamped into L..H.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(payload) > QR_MAX_PAYLOAD:
        raise ValidationError(
            f"QR payload is {len(payload)} bytes, it should be at most {QR_MAX_PAYLOAD}"
        )
    model_byte = QRModel.MODEL_2 if model else QRModel.MODEL_1
    size_byte = param_byte(size, "QR module size")
    correction = as_int(correction, "QR error correction")
    level = QRErrorCorrection(max(QRErrorCorrection.L, min(QRErrorCorrection.H, correction)))
    p_low, p_high = split_length(len(payload) + QR_STORE_OVERHEAD)
    return [
        _qr_function(4, 0, 49, 65, int(model_byte), 0),
        _qr_function(3, 0, 49, 67, size_byte),
        _qr_function(3, 0, 49, 69, int(level)),
        _qr_function(p_low, p_high, 49, 80, 48) + payload,
        _qr_function(3, 0, 49, 81, 48),
    ]


def raster_image_cmd(raster: RasterPlane, mode: Union[RasterMode, int] = RasterMode.NORMAL) -> bytes:
    """Build the GS v 0 frame for a packed raster plane."""
    raster.validate()
    try:
        mode = RasterMode(mode)
    except ValueError as exc:
        raise ValidationError(f"Unknown raster mode: {mode}") from exc
    x_low, x_high = split_length(raster.width_bytes)
    y_low, y_high = split_length(raster.height)
    header = bytes([GS, ord("v"), 48, int(mode), x_low, x_high, y_low, y_high])
    return header + raster.data


def nv_bit_image_cmd(index: int, mode: int) -> bytes:
    """Build the command printing a stored NV bit image (index starts at 1)."""
    index = as_int(index, "NV image index")
    mode = as_int(mode, "NV image mode")
    if index == 0:
        raise ValidationError("start index of nv bit images start at 1")
    if mode < 0 or mode > 3:
        raise ValidationError("mode only supports values from 0 to 3")
    return bytes([FS, ord("p"), param_byte(index, "NV image index"), mode])


def feed_lines_cmd(lines: int) -> bytes:
    """Build the print-and-feed command."""
    return bytes([ESC, ord("d"), param_byte(lines, "line count")])


def default_line_spacing_cmd() -> bytes:
    """Build the command restoring the default 1/6 inch line spacing."""
    return bytes([ESC, ord("2")])


def line_spacing_cmd(units: int) -> bytes:
    """Build the line spacing command in motion units."""
    return bytes([ESC, ord("3"), param_byte(units, "line spacing")])


def motion_units_cmd(x: int, y: int) -> bytes:
    """Build the horizontal and vertical motion unit command."""
    return bytes([GS, ord("P"), param_byte(x, "horizontal motion unit"), param_byte(y, "vertical motion unit")])


def initialize_cmd() -> bytes:
    """Build the command resetting the printer to its power-on state."""
    return bytes([ESC, ord("@")])


def cut_cmd() -> bytes:
    """Build the feed-and-cut command."""
    return bytes([GS, ord("V"), ord("A"), ord("0")])
