"""
DrawingContext: thin drawing handle over a PackedBitmap.

Only pixel and rectangle fills live here; everything is written through
the bitmap's own set_pixel / get_pixel, so the threshold applies.
"""

import math

from .colors import NAMED_COLORS


class DrawingContext:
    """
    Handle returned by PackedBitmap.create_context().

    Attributes:
        bitmap: The bound PackedBitmap.
        fill_color: RRGGBBAA used by fill_pixel and fill_rect (default black).
    """

    def __init__(self, bitmap):
        self.bitmap = bitmap
        self.fill_color = NAMED_COLORS["black"]

    def fill_pixel(self, x, y) -> None:
        self.bitmap.set_pixel(x, y, self.fill_color)

    def get_pixel(self, x, y) -> int:
        return self.bitmap.get_pixel(x, y)

    def fill_rect(self, x, y, w, h) -> None:
        """Fill the rectangle with fill_color, clipped to the bitmap."""
        self._paint_rect(x, y, w, h, self.fill_color)

    def clear_rect(self, x, y, w, h) -> None:
        """Reset the rectangle to transparent, clipped to the bitmap."""
        self._paint_rect(x, y, w, h, NAMED_COLORS["transparent"])

    def _paint_rect(self, x, y, w, h, rgba: int) -> None:
        # Off-canvas pixels are skipped, never folded onto (0, 0)
        x0 = max(math.floor(x), 0)
        y0 = max(math.floor(y), 0)
        x1 = min(math.floor(x + w), self.bitmap.width)
        y1 = min(math.floor(y + h), self.bitmap.height)
        for py in range(y0, y1):
            for px in range(x0, x1):
                self.bitmap.set_pixel(px, py, rgba)
