"""
PackedBitmap: 1-bit-per-pixel raster buffer.

Storage layout:
  - data: bytearray of length ceil(width * height / 8)
  - pixel (x, y) has index i = width * y + x (row-major, origin top-left)
  - pixel i lives at byte i // 8, bit i % 8 (LSB-first)
  - bit 1 = white, bit 0 = black; color and alpha are discarded on write

Coordinate policy:
  Out-of-range coordinates resolve to pixel index 0, so a write through a
  bad (x, y) lands on pixel (0, 0) instead of failing. Construct with
  strict_bounds=True to raise CoordinateOutOfRangeError instead.

Two addressing modes share `data`:
  - packed: index_of / set_pixel / set_pixel_at / get_pixel (1 bit per pixel)
  - channels: ChannelView (4 raw bytes per pixel at byte offset index_of(x, y))
  Mixing them on one bitmap gives meaningless pixels; nothing reconciles
  the two layouts.
"""

import math

from .colors import NAMED_COLORS
from .context import DrawingContext
from .core import bitmap_receipt
from .errors import (
    BitmapAllocationError,
    CoordinateOutOfRangeError,
    PixelIndexError,
)
from .kernel import (
    BLACK_BIT,
    byte_and_bit_index,
    get_bit,
    packed_length,
    rgba_to_bit,
    set_bit,
    unpack_rows,
)

CHANNELS = 4


def _floor_coord(value):
    """Floor a coordinate; None for NaN or infinity."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return math.floor(value)


class PackedBitmap:
    """
    Fixed-size monochrome bitmap.

    Args:
        width: Any real number; floored.
        height: Any real number; floored.
        options: Opaque; stored, never consulted.
        strict_bounds: Raise on out-of-range coordinates instead of
            resolving them to pixel index 0.

    Raises:
        BitmapAllocationError: If width or height is NaN or infinite.
    """

    def __init__(self, width, height, options=None, *, strict_bounds: bool = False):
        try:
            self.width = math.floor(width)
            self.height = math.floor(height)
        except (ValueError, OverflowError) as exc:
            raise BitmapAllocationError(
                f"Cannot allocate a {width!r}x{height!r} bitmap"
            ) from exc

        self.options = options
        self.strict_bounds = strict_bounds
        self.data = bytearray(packed_length(self.pixel_count))
        self.channels = ChannelView(self)

        self.fill(NAMED_COLORS["transparent"])

    @property
    def pixel_count(self) -> int:
        if self.width <= 0 or self.height <= 0:
            return 0
        return self.width * self.height

    def index_of(self, x, y) -> int:
        """
        Pixel index of (x, y) after flooring both coordinates.

        Returns 0 for anything outside the grid (or raises
        CoordinateOutOfRangeError in strict mode).
        """
        fx = _floor_coord(x)
        fy = _floor_coord(y)
        if (fx is None or fy is None
                or fx < 0 or fy < 0
                or fx >= self.width or fy >= self.height):
            if self.strict_bounds:
                raise CoordinateOutOfRangeError(x, y, self.width, self.height)
            return 0
        return self.width * fy + fx

    def set_pixel(self, x, y, rgba: int, buffer: bytearray | None = None) -> None:
        """
        Threshold rgba and store the bit at (x, y).

        `buffer` redirects the write into another packed buffer laid out like
        `data` (same geometry); it defaults to `data`.
        """
        i = self.index_of(x, y)
        if i >= self.pixel_count:
            # empty bitmap: there is no pixel (0, 0) to land on
            return
        set_bit(self._target(buffer), *byte_and_bit_index(i), rgba_to_bit(rgba))

    def set_pixel_at(self, pixel_index: int, rgba: int,
                     buffer: bytearray | None = None) -> None:
        """
        Threshold rgba and store the bit at a raw pixel index.

        The index is not clamped to (0, 0) like a coordinate is; it is
        validated against the pixel grid, and an index that only reaches
        the padding bits of the last byte is rejected too. `buffer` works as in set_pixel.

        Raises:
            PixelIndexError: If pixel_index is outside [0, width*height).
        """
        if not 0 <= pixel_index < self.pixel_count:
            raise PixelIndexError(
                f"Pixel index {pixel_index} outside [0, {self.pixel_count})"
            )
        set_bit(self._target(buffer), *byte_and_bit_index(pixel_index), rgba_to_bit(rgba))

    def _target(self, buffer):
        return self.data if buffer is None else buffer

    def get_bit(self, x, y) -> int:
        i = self.index_of(x, y)
        if i >= self.pixel_count:
            return BLACK_BIT
        return get_bit(self.data, *byte_and_bit_index(i))

    def get_pixel(self, x, y) -> int:
        """
        Canonical black or white for the stored bit at (x, y).

        The original color and alpha are gone; only the threshold decision
        survives a write.
        """
        if self.get_bit(x, y) == BLACK_BIT:
            return NAMED_COLORS["black"]
        return NAMED_COLORS["white"]

    def get_pixel_region(self, x, y) -> memoryview:
        """Unpacked access; see ChannelView.region."""
        return self.channels.region(x, y)

    def set_pixel_channels(self, x, y, r: int, g: int, b: int, a: int) -> None:
        """Unpacked access; see ChannelView.write."""
        self.channels.write(x, y, r, g, b, a)

    def fill(self, rgba: int) -> None:
        """Write rgba to every pixel in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                self.set_pixel(x, y, rgba)

    def to_rows(self) -> list[list[int]]:
        return unpack_rows(self.data, self.height, self.width)

    def create_context(self) -> DrawingContext:
        """Return a new DrawingContext bound to this bitmap."""
        return DrawingContext(self)

    def receipt(self, label: str = "bitmap") -> dict:
        """Hashed record of the current pixels; see core.bitmap_receipt."""
        return bitmap_receipt(self, label)

    def __eq__(self, other):
        if not isinstance(other, PackedBitmap):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and self.data == other.data)

    def __repr__(self):
        return f"PackedBitmap(width={self.width}, height={self.height}, bytes={len(self.data)})"


class ChannelView:
    """
    4-bytes-per-pixel window over a PackedBitmap's storage.

    Pixel (x, y) maps to byte offset index_of(x, y), not to the packed
    byte holding its bit. Only meaningful for buffers populated through
    write(); reading a bit-packed bitmap through this view yields raw
    packed bytes.
    """

    def __init__(self, bitmap: PackedBitmap):
        self.bitmap = bitmap

    def region(self, x, y) -> memoryview:
        """
        Up to CHANNELS bytes starting at byte offset index_of(x, y).

        The view shares memory with bitmap.data and is shorter than
        CHANNELS bytes near the end of the buffer.
        """
        i = self.bitmap.index_of(x, y)
        return memoryview(self.bitmap.data)[i:i + CHANNELS]

    def write(self, x, y, r: int, g: int, b: int, a: int) -> None:
        """Store r, g, b, a (each masked to 8 bits); bytes past the end are dropped."""
        i = self.bitmap.index_of(x, y)
        data = self.bitmap.data
        for offset, value in enumerate((r, g, b, a)):
            if i + offset < len(data):
                data[i + offset] = int(value) & 0xFF

