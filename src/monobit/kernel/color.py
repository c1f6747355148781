"""
Color -> Monochrome

RRGGBBAA decoding and the fixed luminance threshold.

Luminance uses the BT.709 weights (0.2126, 0.7152, 0.0722). They are kept
as integers scaled by 10000 so rounding is exact: L rounds half away from
zero, and a pixel is white iff round(L) >= 200.
"""

LUMINANCE_WEIGHTS = (2126, 7152, 722)
LUMINANCE_SCALE = 10000
GREY_SCALE_LIMIT = 200

BLACK_BIT = 0
WHITE_BIT = 1


def decode_color(rgba: int) -> tuple[int, int, int]:
    """
    Split a 32-bit RRGGBBAA value into (r, g, b). Alpha is dropped.

    Example:
        >>> decode_color(0xFF000000)
        (255, 0, 0)
    """
    r = (rgba >> 24) & 0xFF
    g = (rgba >> 16) & 0xFF
    b = (rgba >> 8) & 0xFF
    return r, g, b


def luminance(r: int, g: int, b: int) -> int:
    """
    Rounded BT.709 luminance of an RGB triple.

    Example:
        >>> luminance(255, 0, 0)   # 54.213
        54
    """
    wr, wg, wb = LUMINANCE_WEIGHTS
    scaled = wr * r + wg * g + wb * b
    half = LUMINANCE_SCALE // 2
    if scaled >= 0:
        return (scaled + half) // LUMINANCE_SCALE
    return -((-scaled + half) // LUMINANCE_SCALE)


def to_monochrome(r: int, g: int, b: int) -> int:
    """Return WHITE_BIT when luminance >= GREY_SCALE_LIMIT, else BLACK_BIT."""
    return WHITE_BIT if luminance(r, g, b) >= GREY_SCALE_LIMIT else BLACK_BIT


def rgba_to_bit(rgba: int) -> int:
    """decode_color followed by to_monochrome."""
    return to_monochrome(*decode_color(rgba))
