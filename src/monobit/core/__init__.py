"""
Core foundation: frozen parameters, hashing, byte frames, bitmap receipts.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash
from .bytesio import (
    FRAME_TAG,
    serialize_bitmap,
    SerializationError
)
from .receipts import (
    RECEIPT_FIELDS,
    registry_hash,
    bitmap_receipt,
    diff_receipts,
    assert_reproducible,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",

    # Serialization
    "FRAME_TAG",
    "serialize_bitmap",
    "SerializationError",

    # Receipts
    "RECEIPT_FIELDS",
    "registry_hash",
    "bitmap_receipt",
    "diff_receipts",
    "assert_reproducible",
    "DeterminismError",
]
