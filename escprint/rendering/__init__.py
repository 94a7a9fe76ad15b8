from .loader import SUPPORTED_EXTENSIONS, load_image, resize_to_width
from .pixels import Pixel, PixelBuffer
from .renderer import buffer_to_raster, flatten_alpha, image_to_raster, luminance, threshold

__all__ = [
    "buffer_to_raster",
    "flatten_alpha",
    "image_to_raster",
    "load_image",
    "luminance",
    "Pixel",
    "PixelBuffer",
    "resize_to_width",
    "SUPPORTED_EXTENSIONS",
    "threshold",
]
