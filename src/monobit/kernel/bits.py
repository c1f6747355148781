"""
Packed Bits (SPLIT, GET, SET)

Pixel stream <-> byte buffer addressing.

Representation:
  - bytearray of length ceil(N / 8) for N pixels
  - pixel i lives at byte i // 8, bit i % 8 (LSB-first)
  - bit == 1 means white, bit == 0 means black
"""


def byte_and_bit_index(pixel_index: int) -> tuple[int, int]:
    """
    Split a pixel index into (byte_index, bit_index).

    Example:
        >>> byte_and_bit_index(13)
        (1, 5)
    """
    return pixel_index // 8, pixel_index % 8


def packed_length(pixel_count: int) -> int:
    """Bytes needed for pixel_count bits; 0 for non-positive counts."""
    if pixel_count <= 0:
        return 0
    return (pixel_count + 7) // 8


def get_bit(buffer: bytearray, byte_index: int, bit_index: int) -> int:
    """Return 0 or 1 for the given bit of buffer[byte_index]."""
    return (buffer[byte_index] >> bit_index) & 1


def set_bit(buffer: bytearray, byte_index: int, bit_index: int, value: int) -> None:
    """
    Set (value != 0) or clear (value == 0) one bit in place.

    The other 7 bits of the byte are left untouched.
    """
    if value == 0:
        buffer[byte_index] &= ~(1 << bit_index) & 0xFF
    else:
        buffer[byte_index] |= (1 << bit_index)


def count_set_bits(buffer: bytearray, bit_count: int) -> int:
    """
    Count 1-bits among the first bit_count bits of buffer.

    Padding bits past bit_count in the last byte are ignored.
    """
    if bit_count <= 0:
        return 0
    full, rem = divmod(bit_count, 8)
    total = sum(bin(b).count('1') for b in buffer[:full])
    if rem:
        total += bin(buffer[full] & ((1 << rem) - 1)).count('1')
    return total


def unpack_rows(buffer: bytearray, H: int, W: int) -> list[list[int]]:
    """
    Expand the packed stream into H rows of W 0/1 values.

    Invariant:
        unpack_rows(buf, H, W)[y][x] == get_bit(buf, *byte_and_bit_index(W*y + x))
    """
    if H <= 0 or W <= 0:
        return []
    rows = []
    for y in range(H):
        row = []
        for x in range(W):
            row.append(get_bit(buffer, *byte_and_bit_index(W * y + x)))
        rows.append(row)
    return rows
