from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from PIL import Image

from .errors import TransportError
from .protocol import commands
from .protocol.types import (
    BarcodeKind,
    HRIPosition,
    QRErrorCorrection,
    RasterMode,
    RasterPlane,
    Style,
)
from .rendering.renderer import image_to_raster
from .text import TextEncoder, codepage_encoder
from .transport import Sink

logger = logging.getLogger(__name__)


class Printer:
    """Sends ESC/POS commands to a byte sink.

    Every method validates its input and builds all frames before the first
    write, so a ValidationError never leaves a partial command on the wire.
    A TransportError means the command failed; some of its bytes may already
    have been sent.
    """

    def __init__(
        self,
        sink: Sink,
        style: Optional[Style] = None,
        encoder: Optional[TextEncoder] = None,
    ) -> None:
        self._sink = sink
        self.style = style or Style()
        self._encoder = encoder or codepage_encoder()

    def set_style(self, **changes) -> Style:
        """Replace the current style with a copy carrying ``changes``."""
        self.style = self.style.replace(**changes)
        return self.style

    def reset_style(self) -> Style:
        self.style = Style()
        return self.style

    def write_raw(self, data: bytes) -> int:
        """Send bytes unmodified."""
        if not data:
            return 0
        return self._send([bytes(data)])

    def write_frames(self, frames: Iterable[bytes]) -> int:
        """Send already built frames in order, e.g. a job held in a FrameBuffer."""
        return self._send(frames)

    def write(self, text: str, encoder: Optional[TextEncoder] = None) -> int:
        """Apply the current style, then print ``text``.

        Returns the number of text bytes written, not counting style frames.
        """
        data = (encoder or self._encoder)(text)
        frames = commands.text_frames(self.style, data)
        self._send(frames)
        return len(data)

    def line_feed(self) -> int:
        return self.write("\n")

    def feed_lines(self, lines: int) -> int:
        """Print the buffer and feed ``lines`` lines."""
        return self._send([commands.feed_lines_cmd(lines)])

    def default_line_spacing(self) -> int:
        return self._send([commands.default_line_spacing_cmd()])

    def line_spacing(self, units: int) -> int:
        return self._send([commands.line_spacing_cmd(units)])

    def motion_units(self, x: int, y: int) -> int:
        return self._send([commands.motion_units_cmd(x, y)])

    def initialize(self) -> int:
        return self._send([commands.initialize_cmd()])

    def cut(self) -> int:
        return self._send([commands.cut_cmd()])

    def hri_position(self, position: Union[HRIPosition, int]) -> int:
        return self._send([commands.hri_position_cmd(position)])

    def hri_font(self, font_b: bool) -> int:
        return self._send([commands.hri_font_cmd(font_b)])

    def barcode_height(self, dots: int) -> int:
        return self._send([commands.barcode_height_cmd(dots)])

    def barcode_width(self, width: int) -> int:
        return self._send([commands.barcode_width_cmd(width)])

    def barcode(self, kind: Union[BarcodeKind, int], code: str) -> int:
        return self._send([commands.barcode_cmd(kind, code)])

    def upca(self, code: str) -> int:
        return self.barcode(BarcodeKind.UPC_A, code)

    def upce(self, code: str) -> int:
        return self.barcode(BarcodeKind.UPC_E, code)

    def ean13(self, code: str) -> int:
        return self.barcode(BarcodeKind.EAN13, code)

    def ean8(self, code: str) -> int:
        return self.barcode(BarcodeKind.EAN8, code)

    def qr_code(
        self,
        data: Union[str, bytes],
        model: bool = True,
        size: int = 3,
        correction: Union[QRErrorCorrection, int] = QRErrorCorrection.L,
    ) -> int:
        """Store and print a QR code in five frames."""
        return self._send(commands.qr_code_cmds(data, model, size, correction))

    def print_raster(self, raster: RasterPlane, mode: Union[RasterMode, int] = RasterMode.NORMAL) -> int:
        return self._send([commands.raster_image_cmd(raster, mode)])

    def print_image(
        self,
        img: Image.Image,
        width: Optional[int] = None,
        mode: Union[RasterMode, int] = RasterMode.NORMAL,
    ) -> int:
        """Threshold an image and print it with the raster image command."""
        raster = image_to_raster(img, width)
        logger.debug("Rasterized image to %dx%d", raster.width, raster.height)
        return self.print_raster(raster, mode)

    def print_nv_bit_image(self, index: int, mode: int = 0) -> int:
        return self._send([commands.nv_bit_image_cmd(index, mode)])

    def _send(self, frames: Iterable[bytes]) -> int:
        written = 0
        for frame in frames:
            logger.debug("Sending %d bytes", len(frame))
            try:
                self._sink.write(frame)
            except OSError as exc:
                raise TransportError(f"Write failed after {written} bytes: {exc}") from exc
            written += len(frame)
        return written
