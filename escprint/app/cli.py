from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import List, Optional, Tuple

from ..errors import EscPrintError
from ..printer import Printer
from ..protocol.types import BarcodeKind, Justify, QRErrorCorrection, RasterMode
from ..rendering.loader import load_image
from ..rendering.renderer import image_to_raster
from ..settings import PrintSettings
from ..text import codepage_encoder
from ..transport.buffer import FrameBuffer
from ..transport.serial import SerialTransport
from ..transport.stream import StreamTransport

logger = logging.getLogger(__name__)

BARCODE_KINDS = {
    "upca": BarcodeKind.UPC_A,
    "upce": BarcodeKind.UPC_E,
    "ean13": BarcodeKind.EAN13,
    "ean8": BarcodeKind.EAN8,
}
JUSTIFY_CHOICES = {"left": Justify.LEFT, "center": Justify.CENTER, "right": Justify.RIGHT}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="escprint",
        description="Send text, barcodes, QR codes and images to ESC/POS thermal printers.",
    )
    parser.add_argument("path", nargs="?", help="Image to print (.png/.jpg/.gif/.bmp)")
    parser.add_argument("--text", metavar="TEXT", help="Print text with the selected style")
    parser.add_argument("--barcode", metavar="KIND:CODE", help="Print a barcode (upca, upce, ean13, ean8)")
    parser.add_argument("--qr", metavar="DATA", help="Print a QR code")
    parser.add_argument("--qr-size", type=int, default=3, help="QR module size in dots (default: 3)")
    parser.add_argument(
        "--qr-level",
        choices=[level.name for level in QRErrorCorrection],
        default="L",
        help="QR error correction level (default: L)",
    )

    style = parser.add_argument_group("text style")
    style.add_argument("--bold", action="store_true", help="Bold text")
    style.add_argument("--underline", type=int, choices=(0, 1, 2), default=0, help="Underline thickness")
    style.add_argument("--reverse", action="store_true", help="White on black text")
    style.add_argument("--justify", choices=sorted(JUSTIFY_CHOICES), default="left")
    style.add_argument("--size", metavar="WxH", default="1x1", help="Character multipliers, 1-5 each")
    style.add_argument("--codepage", help="Code page used to encode text (default: cp437)")

    sink = parser.add_mutually_exclusive_group()
    sink.add_argument("--serial", metavar="PATH", help="Serial port of the printer (e.g. /dev/ttyUSB0)")
    sink.add_argument("--device", metavar="PATH", help="Printer device file (e.g. /dev/usb/lp0)")
    sink.add_argument("--output", metavar="FILE", help="Write the command bytes to FILE ('-' for stdout)")
    parser.add_argument("--baud", type=int, help="Serial baud rate")
    parser.add_argument("--chunk-size", type=int, help="Split serial writes into chunks of this many bytes")
    parser.add_argument("--interval", type=int, metavar="MS", help="Delay between serial chunks in milliseconds")

    parser.add_argument("--width", type=int, help="Scale images to this width in dots")
    parser.add_argument(
        "--raster-mode",
        choices=[mode.name.lower() for mode in RasterMode],
        help="Raster image scaling mode (default: normal)",
    )
    parser.add_argument("--preview", metavar="PNG", help="Save the thresholded image instead of printing it")
    parser.add_argument("--init", action="store_true", help="Initialize the printer first")
    parser.add_argument("--cut", action="store_true", help="Cut the paper when done")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = value.lower().split("x", 1)
        return int(width), int(height)
    except ValueError:
        raise ValueError(f"Invalid size '{value}', expected WxH") from None


def parse_barcode(value: str) -> Tuple[BarcodeKind, str]:
    kind, sep, code = value.partition(":")
    if not sep or kind.lower() not in BARCODE_KINDS:
        raise ValueError(f"Invalid barcode '{value}', expected KIND:CODE with KIND one of "
                         + ", ".join(sorted(BARCODE_KINDS)))
    return BARCODE_KINDS[kind.lower()], code


def _resolve_settings(args: argparse.Namespace) -> PrintSettings:
    settings = PrintSettings.from_env()
    if args.baud is not None:
        settings.baud_rate = args.baud
    if args.codepage:
        settings.codepage = args.codepage
    if args.width is not None:
        settings.image_width = args.width
    if args.chunk_size is not None:
        if args.chunk_size < 1:
            raise ValueError(f"--chunk-size must be at least 1, got {args.chunk_size}")
        settings.chunk_size = args.chunk_size
    if args.interval is not None:
        settings.interval_ms = max(0, args.interval)
    if args.raster_mode:
        settings.raster_mode = RasterMode[args.raster_mode.upper()]
    return settings


def _open_sink(args: argparse.Namespace, settings: PrintSettings, stack: ExitStack):
    if args.output == "-":
        return StreamTransport(stream=sys.stdout.buffer)
    if args.output:
        return stack.enter_context(StreamTransport(path=args.output))
    if args.serial:
        return stack.enter_context(
            SerialTransport(args.serial, settings.baud_rate, settings.chunk_size, settings.interval_ms)
        )
    device = args.device or settings.device
    if not device:
        raise ValueError("No printer given: use --serial, --device, --output or set ESCPRINT_DEVICE")
    return stack.enter_context(StreamTransport(path=device))


def build_job(args: argparse.Namespace, settings: PrintSettings) -> FrameBuffer:
    """Encode every requested item into a FrameBuffer without touching a printer."""
    width, height = parse_size(args.size)
    barcode = parse_barcode(args.barcode) if args.barcode else None
    image = load_image(args.path) if args.path else None

    job = FrameBuffer()
    printer = Printer(job, encoder=codepage_encoder(settings.codepage))
    printer.set_style(
        bold=args.bold,
        underline=args.underline,
        reverse=args.reverse,
        justify=JUSTIFY_CHOICES[args.justify],
        width=width,
        height=height,
    )
    if args.init:
        printer.initialize()
    if image is not None:
        printer.print_image(image, settings.image_width, settings.raster_mode)
    if args.text is not None:
        printer.write(args.text)
        printer.line_feed()
    if barcode is not None:
        printer.barcode(*barcode)
    if args.qr is not None:
        printer.qr_code(args.qr, size=args.qr_size, correction=QRErrorCorrection[args.qr_level])
    if args.cut:
        printer.cut()
    return job


def run(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    if args.preview:
        if not args.path:
            raise ValueError("--preview needs an image path")
        raster = image_to_raster(load_image(args.path), settings.image_width)
        raster.to_image().save(args.preview)
        return 0

    job = build_job(args, settings)
    logger.debug("Built %d frames, %d bytes", len(job), len(job.data))
    with ExitStack() as stack:
        sink = _open_sink(args, settings, stack)
        Printer(sink).write_frames(job.frames)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not any((args.path, args.text is not None, args.barcode, args.qr is not None)):
        print("Nothing to print: give an image path, --text, --barcode or --qr. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return run(args)
    except (EscPrintError, ValueError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
