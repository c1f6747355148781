"""
Kernel: pure operations on packed bit buffers and RGBA values.

Components:
  - bits: SPLIT/GET/SET on LSB-first packed bytes
  - color: RRGGBBAA decoding, luminance, threshold
"""

from .bits import (
    byte_and_bit_index,
    packed_length,
    get_bit,
    set_bit,
    count_set_bits,
    unpack_rows
)
from .color import (
    LUMINANCE_WEIGHTS,
    LUMINANCE_SCALE,
    GREY_SCALE_LIMIT,
    BLACK_BIT,
    WHITE_BIT,
    decode_color,
    luminance,
    to_monochrome,
    rgba_to_bit
)

__all__ = [
    # Bits
    "byte_and_bit_index",
    "packed_length",
    "get_bit",
    "set_bit",
    "count_set_bits",
    "unpack_rows",

    # Color
    "LUMINANCE_WEIGHTS",
    "LUMINANCE_SCALE",
    "GREY_SCALE_LIMIT",
    "BLACK_BIT",
    "WHITE_BIT",
    "decode_color",
    "luminance",
    "to_monochrome",
    "rgba_to_bit",
]
