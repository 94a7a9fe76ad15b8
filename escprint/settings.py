from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ValidationError
from .protocol.types import RasterMode
from .text import DEFAULT_CODEPAGE
from .transport.serial import SERIAL_BAUD_RATE

DEVICE_ENV_VAR = "ESCPRINT_DEVICE"
BAUD_RATE_ENV_VAR = "ESCPRINT_BAUD_RATE"
CODEPAGE_ENV_VAR = "ESCPRINT_CODEPAGE"
WIDTH_ENV_VAR = "ESCPRINT_WIDTH"


@dataclass
class PrintSettings:
    device: Optional[str] = None
    baud_rate: int = SERIAL_BAUD_RATE
    chunk_size: Optional[int] = None
    interval_ms: int = 0
    codepage: str = DEFAULT_CODEPAGE
    image_width: Optional[int] = None
    raster_mode: RasterMode = RasterMode.NORMAL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PrintSettings":
        """Build settings from ESCPRINT_* environment variables."""
        if environ is None:
            environ = os.environ
        settings = cls()
        device = environ.get(DEVICE_ENV_VAR, "").strip()
        if device:
            settings.device = device
        codepage = environ.get(CODEPAGE_ENV_VAR, "").strip()
        if codepage:
            settings.codepage = codepage
        settings.baud_rate = _env_int(environ, BAUD_RATE_ENV_VAR, settings.baud_rate)
        settings.image_width = _env_int(environ, WIDTH_ENV_VAR, settings.image_width)
        return settings


def _env_int(environ: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    value = environ.get(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"{key} must be an integer, got {value!r}") from exc
