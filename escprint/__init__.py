from .errors import EscPrintError, TransportError, ValidationError
from .printer import Printer
from .protocol import (
    BarcodeKind,
    HRIPosition,
    Justify,
    QRErrorCorrection,
    QRModel,
    RasterMode,
    RasterPlane,
    Style,
)
from .rendering import Pixel, PixelBuffer, image_to_raster
from .settings import PrintSettings
from .text import TextEncoder, codepage_encoder
from .transport import FrameBuffer, SerialTransport, Sink, StreamTransport

__version__ = "0.1.0"

__all__ = [
    "BarcodeKind",
    "codepage_encoder",
    "EscPrintError",
    "FrameBuffer",
    "HRIPosition",
    "image_to_raster",
    "Justify",
    "Pixel",
    "PixelBuffer",
    "Printer",
    "PrintSettings",
    "QRErrorCorrection",
    "QRModel",
    "RasterMode",
    "RasterPlane",
    "SerialTransport",
    "Sink",
    "StreamTransport",
    "Style",
    "TextEncoder",
    "TransportError",
    "ValidationError",
]
