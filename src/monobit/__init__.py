"""
monobit: packed 1-bit-per-pixel raster buffer.

RGBA colors (RRGGBBAA) are thresholded on BT.709 luminance into one
black/white bit per pixel, stored LSB-first in a bytearray.
"""

__version__ = "0.1.0"

from .bitmap import PackedBitmap, ChannelView
from .core import bitmap_receipt, assert_reproducible
from .colors import NAMED_COLORS
from .context import DrawingContext
from .errors import (
    BitmapError,
    BitmapAllocationError,
    CoordinateOutOfRangeError,
    PixelIndexError,
)
from .kernel import decode_color, luminance, to_monochrome, rgba_to_bit

__all__ = [
    "PackedBitmap",
    "ChannelView",
    "DrawingContext",
    "bitmap_receipt",
    "assert_reproducible",
    "NAMED_COLORS",

    # Color conversion
    "decode_color",
    "luminance",
    "to_monochrome",
    "rgba_to_bit",

    # Errors
    "BitmapError",
    "BitmapAllocationError",
    "CoordinateOutOfRangeError",
    "PixelIndexError",
]
