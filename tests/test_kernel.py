"""
Kernel Tests: packed bits and color conversion

Verifies:
  - byte/bit split is LSB-first
  - set_bit touches exactly one bit
  - padding bits are ignored by count_set_bits
  - RRGGBBAA decoding and the luminance threshold, including an exact
    rational reference over a sampled RGB lattice
"""

import math
import sys
from fractions import Fraction
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from monobit.kernel import (
    BLACK_BIT,
    WHITE_BIT,
    byte_and_bit_index,
    count_set_bits,
    decode_color,
    get_bit,
    luminance,
    packed_length,
    rgba_to_bit,
    set_bit,
    to_monochrome,
    unpack_rows,
)


def test_byte_and_bit_index():
    assert byte_and_bit_index(0) == (0, 0)
    assert byte_and_bit_index(7) == (0, 7)
    assert byte_and_bit_index(8) == (1, 0)
    assert byte_and_bit_index(13) == (1, 5)


@pytest.mark.parametrize("count,expected", [(0, 0), (-5, 0), (1, 1), (8, 1), (9, 2), (30, 4)])
def test_packed_length(count, expected):
    assert packed_length(count) == expected


def test_set_bit_isolated():
    buf = bytearray([0b10100101])
    set_bit(buf, 0, 1, 1)
    assert buf[0] == 0b10100111
    set_bit(buf, 0, 7, 0)
    assert buf[0] == 0b00100111
    set_bit(buf, 0, 7, 0)
    assert buf[0] == 0b00100111
    assert get_bit(buf, 0, 5) == 1
    assert get_bit(buf, 0, 4) == 0


def test_count_set_bits_ignores_padding():
    buf = bytearray([0xFF, 0xFF])
    assert count_set_bits(buf, 10) == 10
    assert count_set_bits(buf, 16) == 16
    assert count_set_bits(buf, 0) == 0


def test_unpack_rows():
    # index 1 and index 5 set on a 3x2 grid
    buf = bytearray([0b00100010])
    assert unpack_rows(buf, 2, 3) == [[0, 1, 0], [0, 0, 1]]
    assert unpack_rows(buf, 0, 3) == []


def test_decode_color():
    assert decode_color(0xFF000000) == (255, 0, 0)
    assert decode_color(0xFFFFFF00) == (255, 255, 255)
    assert decode_color(0x123456AB) == (0x12, 0x34, 0x56)
    assert decode_color(0x1_00000000 | 0x00FF00FF) == (0, 255, 0)


def test_documented_examples():
    # red: 54.213 -> 54 -> black
    assert luminance(*decode_color(0xFF000000)) == 54
    assert rgba_to_bit(0xFF000000) == BLACK_BIT
    # white with zero alpha is still white
    assert luminance(*decode_color(0xFFFFFF00)) == 255
    assert rgba_to_bit(0xFFFFFF00) == WHITE_BIT


@pytest.mark.parametrize("rgb,bit", [
    ((199, 199, 199), BLACK_BIT),
    ((200, 200, 200), WHITE_BIT),
    ((0, 255, 0), BLACK_BIT),      # 182.376
    ((0, 255, 255), WHITE_BIT),    # 200.787
    ((255, 255, 0), WHITE_BIT),    # 236.589
    ((255, 0, 255), BLACK_BIT),    # 72.624
    ((0, 0, 0), BLACK_BIT),
])
def test_threshold_boundaries(rgb, bit):
    assert to_monochrome(*rgb) == bit


@pytest.mark.parametrize("rgb", [
    (20, 252, 208),
    (51, 255, 87),
    (99, 248, 15),
])
def test_threshold_exact_tie_rounds_up(rgb):
    """L is exactly 199.5 here; a float sum can land just below it."""
    r, g, b = rgb
    assert 2126 * r + 7152 * g + 722 * b == 1995000
    assert luminance(r, g, b) == 200
    assert to_monochrome(r, g, b) == WHITE_BIT
    assert rgba_to_bit((r << 24) | (g << 16) | (b << 8) | 0xFF) == WHITE_BIT


def test_luminance_rounds_to_nearest():
    # 2126 * 5 + 722 * 5 = 14240 -> 1.424; 7152 * 7 + 722 * 4 = 52952 -> 5.2952
    assert luminance(5, 0, 5) == 1
    assert luminance(0, 7, 4) == 5
    assert luminance(0, 0, 0) == 0
    assert luminance(255, 255, 255) == 255


def test_threshold_sampled_lattice():
    """Exact rational reference: white iff floor(L + 1/2) >= 200."""
    weights = (Fraction(2126, 10000), Fraction(7152, 10000), Fraction(722, 10000))
    mismatches = []
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                L = weights[0] * r + weights[1] * g + weights[2] * b
                expected = WHITE_BIT if math.floor(L + Fraction(1, 2)) >= 200 else BLACK_BIT
                if to_monochrome(r, g, b) != expected:
                    mismatches.append((r, g, b))
    assert mismatches == []


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
