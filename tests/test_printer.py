"""Tests for the Printer orchestrator."""

import pytest
from PIL import Image

from escprint import FrameBuffer, Printer, Style, TransportError, ValidationError
from escprint.protocol import BarcodeKind, Justify, RasterPlane
from escprint.text import codepage_encoder


class TestPrinterText:
    """Tests for styled text writes."""

    def test_write_emits_style_then_text(self, sink):
        printer = Printer(sink)
        written = printer.write("Hi")
        assert written == 2
        assert len(sink.frames) == 8
        assert sink.frames[0] == b"\x1bE0"
        assert sink.frames[-1] == b"Hi"

    def test_style_is_reemitted_on_every_write(self, sink):
        printer = Printer(sink, style=Style(bold=True))
        printer.write("a")
        printer.write("b")
        assert sink.frames.count(b"\x1bE1") == 2

    def test_set_style_replaces_value(self, sink):
        printer = Printer(sink)
        before = printer.style
        after = printer.set_style(justify=Justify.CENTER, width=3, height=2)
        assert before.justify is Justify.LEFT
        assert after is printer.style
        printer.write("x")
        assert b"\x1ba\x01" in sink.frames
        assert b"\x1d!\x21" in sink.frames

    def test_reset_style(self, sink):
        printer = Printer(sink, style=Style(bold=True))
        printer.reset_style()
        assert printer.style == Style()

    def test_default_encoder_uses_cp437(self, sink):
        Printer(sink).write("é")
        assert sink.frames[-1] == "é".encode("cp437")

    def test_explicit_encoder(self, sink):
        printer = Printer(sink, encoder=codepage_encoder("cp850"))
        printer.write("ñ")
        printer.write("中", encoder=codepage_encoder("gbk"))
        assert sink.frames[7] == "ñ".encode("cp850")
        assert sink.frames[-1] == "中".encode("gbk")

    def test_unencodable_text_is_replaced(self, sink):
        Printer(sink).write("中")
        assert sink.frames[-1] == b"?"

    def test_line_feed(self, sink):
        Printer(sink).line_feed()
        assert sink.frames[-1] == b"\n"


class TestPrinterCommands:
    """Tests for single-frame commands."""

    @pytest.mark.parametrize(
        "method,args,expected",
        [
            ("initialize", (), b"\x1b@"),
            ("cut", (), b"\x1dVA0"),
            ("feed_lines", (3,), b"\x1bd\x03"),
            ("default_line_spacing", (), b"\x1b2"),
            ("line_spacing", (30,), b"\x1b3\x1e"),
            ("motion_units", (180, 360 // 2), b"\x1dP\xb4\xb4"),
            ("hri_font", (True,), b"\x1df1"),
            ("barcode_height", (162,), b"\x1dh\xa2"),
            ("print_nv_bit_image", (2, 1), b"\x1cp\x02\x01"),
        ],
    )
    def test_command_frames(self, sink, method, args, expected):
        written = getattr(Printer(sink), method)(*args)
        assert sink.frames == [expected]
        assert written == len(expected)

    def test_write_raw(self, sink):
        printer = Printer(sink)
        assert printer.write_raw(b"") == 0
        assert sink.frames == []
        assert printer.write_raw(b"\x1b@") == 2
        assert sink.frames == [b"\x1b@"]

    def test_out_of_range_parameter(self, sink):
        with pytest.raises(ValidationError):
            Printer(sink).feed_lines(256)
        assert sink.frames == []

    def test_float_parameter_rejected(self, sink):
        with pytest.raises(ValidationError):
            Printer(sink).qr_code("x", size=3.7)
        with pytest.raises(ValidationError):
            Printer(sink).set_style(width=2.5)
        assert sink.frames == []

    def test_write_frames_replays_buffered_job(self, sink):
        job = FrameBuffer()
        buffered = Printer(job)
        buffered.initialize()
        buffered.cut()
        assert Printer(sink).write_frames(job.frames) == 6
        assert sink.frames == [b"\x1b@", b"\x1dVA0"]


class TestPrinterBarcodes:
    """Tests for barcode and QR printing."""

    def test_upca(self, sink):
        Printer(sink).upca("12345678901")
        assert sink.frames == [b"\x1dk\x0012345678901\x00"]

    @pytest.mark.parametrize(
        "method,code,kind",
        [("upce", "12345678901", BarcodeKind.UPC_E), ("ean13", "1234567890128", BarcodeKind.EAN13),
         ("ean8", "12345670", BarcodeKind.EAN8)],
    )
    def test_convenience_methods(self, sink, method, code, kind):
        getattr(Printer(sink), method)(code)
        assert sink.frames[0][2] == kind

    def test_invalid_barcode_writes_nothing(self, sink):
        printer = Printer(sink)
        with pytest.raises(ValidationError):
            printer.upca("1234567890A")
        with pytest.raises(ValidationError):
            printer.upca("123")
        assert sink.frames == []

    def test_qr_code_writes_five_frames(self, sink):
        Printer(sink).qr_code("https://example.com", size=4)
        assert len(sink.frames) == 5
        assert sink.frames[3].endswith(b"https://example.com")

    def test_qr_code_limit(self, sink):
        printer = Printer(sink)
        printer.qr_code("a" * 7089)
        assert len(sink.frames) == 5
        with pytest.raises(ValidationError):
            printer.qr_code("a" * 7090)
        assert len(sink.frames) == 5


class TestPrinterImages:
    """Tests for raster image printing."""

    def test_print_image_single_frame(self, sink, make_image):
        Printer(sink).print_image(make_image(9, 9))
        assert sink.frames == [b"\x1dv\x30\x00\x01\x00\x08\x00" + b"\xff" * 8]

    def test_print_image_with_width(self, sink):
        img = Image.new("RGB", (4, 4), "white")
        Printer(sink).print_image(img, width=16)
        assert sink.frames[0][4:8] == b"\x02\x00\x10\x00"

    def test_print_raster_rejects_bad_plane(self, sink):
        with pytest.raises(ValidationError):
            Printer(sink).print_raster(RasterPlane(b"\x00", 4, 2))
        assert sink.frames == []


class TestPrinterTransportErrors:
    """Tests for sink failures."""

    def test_oserror_becomes_transport_error(self, failing_sink):
        sink = failing_sink(fail_on=0)
        with pytest.raises(TransportError) as info:
            Printer(sink).cut()
        assert isinstance(info.value.__cause__, OSError)

    def test_failure_mid_command_stops_sending(self, failing_sink):
        sink = failing_sink(fail_on=2)
        with pytest.raises(TransportError):
            Printer(sink).qr_code("data")
        assert len(sink.frames) == 2
        assert sink.calls == 3

    def test_transport_error_passes_through(self):
        class BrokenSink:
            def write(self, data):
                raise TransportError("gone")

        with pytest.raises(TransportError, match="gone"):
            Printer(BrokenSink()).initialize()
