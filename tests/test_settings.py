"""Tests for settings and text encoders."""

import pytest

from escprint.errors import ValidationError
from escprint.settings import PrintSettings
from escprint.text import codepage_encoder


class TestPrintSettings:
    """Tests for PrintSettings.from_env."""

    def test_defaults(self):
        settings = PrintSettings.from_env({})
        assert settings.device is None
        assert settings.baud_rate == 9600
        assert settings.codepage == "cp437"
        assert settings.image_width is None

    def test_reads_environment(self):
        settings = PrintSettings.from_env(
            {
                "ESCPRINT_DEVICE": " /dev/usb/lp0 ",
                "ESCPRINT_BAUD_RATE": "115200",
                "ESCPRINT_CODEPAGE": "cp850",
                "ESCPRINT_WIDTH": "384",
            }
        )
        assert settings.device == "/dev/usb/lp0"
        assert settings.baud_rate == 115200
        assert settings.codepage == "cp850"
        assert settings.image_width == 384

    def test_invalid_integer(self):
        with pytest.raises(ValidationError, match="ESCPRINT_WIDTH"):
            PrintSettings.from_env({"ESCPRINT_WIDTH": "wide"})


class TestCodepageEncoder:
    """Tests for codepage_encoder."""

    def test_gbk(self):
        assert codepage_encoder("gbk")("中文") == "中文".encode("gbk")

    def test_unknown_codepage(self):
        with pytest.raises(ValidationError):
            codepage_encoder("no-such-codepage")

    def test_strict_errors(self):
        encode = codepage_encoder("cp437", errors="strict")
        with pytest.raises(UnicodeEncodeError):
            encode("中")
