from .commands import (
    barcode_cmd,
    barcode_height_cmd,
    barcode_width_cmd,
    bold_cmd,
    cut_cmd,
    default_line_spacing_cmd,
    feed_lines_cmd,
    flag_byte,
    hri_font_cmd,
    hri_position_cmd,
    initialize_cmd,
    justify_cmd,
    line_spacing_cmd,
    motion_units_cmd,
    nv_bit_image_cmd,
    param_byte,
    qr_code_cmds,
    raster_image_cmd,
    reverse_cmd,
    rotate_cmd,
    size_cmd,
    split_length,
    style_cmds,
    text_frames,
    underline_cmd,
    upside_down_cmd,
    validate_barcode,
)
from .encoding import pack_line, print_dimension, rasterize
from .types import (
    BarcodeKind,
    HRIPosition,
    Justify,
    QRErrorCorrection,
    QRModel,
    RasterMode,
    RasterPlane,
    Style,
)

__all__ = [
    "BarcodeKind",
    "barcode_cmd",
    "barcode_height_cmd",
    "barcode_width_cmd",
    "bold_cmd",
    "cut_cmd",
    "default_line_spacing_cmd",
    "feed_lines_cmd",
    "flag_byte",
    "HRIPosition",
    "hri_font_cmd",
    "hri_position_cmd",
    "initialize_cmd",
    "Justify",
    "justify_cmd",
    "line_spacing_cmd",
    "motion_units_cmd",
    "nv_bit_image_cmd",
    "pack_line",
    "param_byte",
    "print_dimension",
    "QRErrorCorrection",
    "QRModel",
    "qr_code_cmds",
    "raster_image_cmd",
    "RasterMode",
    "RasterPlane",
    "rasterize",
    "reverse_cmd",
    "rotate_cmd",
    "size_cmd",
    "split_length",
    "Style",
    "style_cmds",
    "text_frames",
    "underline_cmd",
    "upside_down_cmd",
    "validate_barcode",
]
