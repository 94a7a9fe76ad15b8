from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from ..protocol.encoding import print_dimension, rasterize
from ..protocol.types import RasterPlane
from .loader import resize_to_width
from .pixels import BLACK, WHITE, Pixel, PixelBuffer

logger = logging.getLogger(__name__)

LUMINANCE_THRESHOLD = 128


def _flatten(pixel: Pixel) -> Pixel:
    alpha = pixel.a
    inv_alpha = 255 - alpha
    return Pixel(
        (alpha * pixel.r + inv_alpha * 255) // 255,
        (alpha * pixel.g + inv_alpha * 255) // 255,
        (alpha * pixel.b + inv_alpha * 255) // 255,
        255,
    )


def luminance(pixel: Pixel) -> float:
    return pixel.r * 0.299 + pixel.g * 0.587 + pixel.b * 0.114


def _threshold(pixel: Pixel) -> Pixel:
    if luminance(pixel) < LUMINANCE_THRESHOLD:
        return BLACK._replace(a=pixel.a)
    return WHITE._replace(a=pixel.a)


def flatten_alpha(buffer: PixelBuffer) -> None:
    """Composite every pixel over a white background and make it opaque."""
    buffer.replace_all(_flatten)


def threshold(buffer: PixelBuffer) -> None:
    """Turn every pixel pure black or pure white by perceptual luminance."""
    buffer.replace_all(_threshold)


def buffer_to_raster(buffer: PixelBuffer) -> RasterPlane:
    """Flatten, threshold and pack a pixel buffer, trimming to multiples of 8."""
    flatten_alpha(buffer)
    threshold(buffer)
    width = print_dimension(buffer.width)
    height = print_dimension(buffer.height)
    if (width, height) != (buffer.width, buffer.height):
        logger.debug(
            "Trimming image from %dx%d to %dx%d", buffer.width, buffer.height, width, height
        )
    return rasterize(buffer, width, height)


def image_to_raster(img: Image.Image, width: Optional[int] = None) -> RasterPlane:
    """Convert a decoded image into a printable raster plane.

    When ``width`` is given the image is first scaled to that width.
    """
    if width is not None:
        img = resize_to_width(img, width)
    return buffer_to_raster(PixelBuffer.from_image(img))
