"""Exceptions raised by the packed bitmap."""


class BitmapError(Exception):
    """Base class for bitmap errors."""
    pass


class BitmapAllocationError(BitmapError):
    """Raised when the requested dimensions cannot size a backing buffer."""
    pass


class CoordinateOutOfRangeError(BitmapError, IndexError):
    """Raised for an out-of-range (x, y) when strict_bounds is on."""

    def __init__(self, x, y, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate ({x}, {y}) outside {width}x{height} bitmap"
        )


class PixelIndexError(BitmapError, IndexError):
    """Raised when a raw pixel index falls outside [0, width*height)."""
    pass
