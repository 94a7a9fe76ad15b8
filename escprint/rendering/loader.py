from __future__ import annotations

import os

from PIL import Image, ImageOps

SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


def load_image(path: str) -> Image.Image:
    """Open an image file, applying its EXIF orientation."""
    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def resize_to_width(img: Image.Image, width: int) -> Image.Image:
    if width <= 0:
        raise ValueError("Width must be greater than zero")
    if img.width == width:
        return img
    if img.width == 0:
        raise ValueError("Cannot resize an empty image")
    ratio = width / float(img.width)
    height = max(1, int(img.height * ratio))
    return img.resize((width, height), Image.LANCZOS)
