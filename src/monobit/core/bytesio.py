"""
Byte Serialization (Big-Endian header, raw packed payload)

Stable, deterministic byte frame of a packed bitmap, used as hash input.

Frame (exact):
  - 4 ASCII bytes tag: b"MBM1"
  - 4 bytes width (uint32, big-endian)
  - 4 bytes height (uint32, big-endian)
  - Payload: the packed storage bytes as-is (LSB-first within each byte)

Non-positive dimensions are written as 0; their storage is empty.
This is not an image file format.
"""

FRAME_TAG = b"MBM1"
_MAX_DIM = 0xFFFFFFFF


def serialize_bitmap(bitmap) -> bytes:
    """
    Encode a bitmap's dimensions and packed storage as one byte stream.

    Args:
        bitmap: Any object with integer `width`, `height` and a bytes-like `data`.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If a dimension does not fit in uint32, or the
            storage length disagrees with the dimensions.
    """
    W = max(bitmap.width, 0)
    H = max(bitmap.height, 0)
    if W > _MAX_DIM or H > _MAX_DIM:
        raise SerializationError(f"Dimensions too large: W={W}, H={H}")

    expected = (W * H + 7) // 8
    if len(bitmap.data) != expected:
        raise SerializationError(
            f"Storage length mismatch: expected {expected}, got {len(bitmap.data)}"
        )

    stream = bytearray()
    stream.extend(FRAME_TAG)
    stream.extend(W.to_bytes(4, byteorder='big'))
    stream.extend(H.to_bytes(4, byteorder='big'))
    stream.extend(bitmap.data)

    return bytes(stream)


class SerializationError(Exception):
    """Raised when a bitmap cannot be framed for hashing."""
    pass
