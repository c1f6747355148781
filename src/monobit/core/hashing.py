"""
BLAKE3 Hashing

Deterministic hash function for receipts and bitmap frames.
No seeding, no randomness, no timestamps.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Args:
        data: Raw bytes to hash (bytes, bytearray or memoryview).

    Returns:
        str: Lowercase hexadecimal digest (64 characters).

    Example:
        >>> blake3_hash(b"test")
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
    """
    hasher = blake3.blake3()
    hasher.update(bytes(data))
    return hasher.hexdigest()
