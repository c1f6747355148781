"""
Bitmap Receipts

A receipt is a flat record of what a packed bitmap holds at one moment:
dimensions, storage length, white/black pixel counts, the BLAKE3 hash of
its serialized frame, and the hash of the parameter registry it was made
under. Equal receipt_hash means identical pixels under identical constants.
"""

import json
from typing import Callable

from ..kernel.bits import count_set_bits
from .bytesio import serialize_bitmap
from .hashing import blake3_hash
from .registry import param_registry

# Fields compared between receipts, in the order they are reported
RECEIPT_FIELDS = (
    "width",
    "height",
    "storage_len",
    "white_pixels",
    "black_pixels",
    "frame_hash",
    "param_registry_hash",
)


def registry_hash() -> str:
    """BLAKE3 of param_registry() as compact, key-sorted JSON."""
    return blake3_hash(_canonical_json(param_registry()))


def bitmap_receipt(bitmap, label: str = "bitmap") -> dict:
    """
    Describe a bitmap's current state.

    Args:
        bitmap: Any object with integer `width`, `height` and a bytes-like `data`.
        label: Free-form name carried into the receipt and its hash.

    Returns:
        dict: {"label", *RECEIPT_FIELDS, "receipt_hash"}. Padding bits in the
        last byte are not counted as pixels.

    Raises:
        SerializationError: If the storage does not match the dimensions.
    """
    frame = serialize_bitmap(bitmap)
    pixels = max(bitmap.width, 0) * max(bitmap.height, 0)
    white = count_set_bits(bitmap.data, pixels)

    receipt = {
        "label": label,
        "width": bitmap.width,
        "height": bitmap.height,
        "storage_len": len(bitmap.data),
        "white_pixels": white,
        "black_pixels": pixels - white,
        "frame_hash": blake3_hash(frame),
        "param_registry_hash": registry_hash(),
    }
    receipt["receipt_hash"] = blake3_hash(_canonical_json(receipt))
    return receipt


def diff_receipts(a: dict, b: dict) -> list[str]:
    """Names of RECEIPT_FIELDS whose values differ between two receipts."""
    return [name for name in RECEIPT_FIELDS if a.get(name) != b.get(name)]


def assert_reproducible(build_bitmap: Callable[[], object], label: str = "bitmap") -> dict:
    """
    Build a bitmap twice and require identical receipts.

    Returns:
        dict: The receipt of the first build.

    Raises:
        DeterminismError: If the two builds hold different pixels or dimensions.
    """
    first = bitmap_receipt(build_bitmap(), label)
    second = bitmap_receipt(build_bitmap(), label)

    if first["receipt_hash"] != second["receipt_hash"]:
        raise DeterminismError(label, diff_receipts(first, second), first, second)
    return first


def _canonical_json(obj) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":")).encode("utf-8")


class DeterminismError(Exception):
    """Raised when two builds of the same bitmap produce different receipts."""

    def __init__(self, label: str, fields: list[str], first: dict, second: dict):
        self.label = label
        self.fields = fields
        self.first = first
        self.second = second

        changes = ", ".join(
            f"{name}: {first.get(name)!r} != {second.get(name)!r}" for name in fields
        )
        super().__init__(f"Bitmap '{label}' is not reproducible ({changes})")
