"""
Parameter Registry

Frozen constants for the packed monochrome buffer.
Threshold, luminance weights, bit order and canonical colors are
defined here with exact values; nothing is read from the environment.

The luminance weights are stored as integers scaled by
`luminance_scale` so that the registry stays float-free and hashable
into receipts.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the buffer.

    Keys and values are JSON-serializable primitives or lists/dicts.
    This registry is hashed into every receipt to prove parametric consistency.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "format_version": "1",

        # Bit i of the pixel stream -> byte i // 8, bit i % 8
        "bit_order": "LSB",

        # ITU-R BT.709 weights * 10000
        "luminance_weights": [2126, 7152, 722],
        "luminance_scale": 10000,
        "luminance_rounding": "half-away-from-zero",

        # L >= threshold -> white (1), else black (0)
        "grey_scale_limit": 200,

        # RRGGBBAA
        "canonical_colors": {
            "black": 0x000000FF,
            "white": 0xFFFFFFFF,
            "transparent": 0x00000000,
        },
        "hash_algo": "BLAKE3",
        "byte_frame_tag": "MBM1",
    }

    required_keys = {
        "format_version", "bit_order", "luminance_weights",
        "luminance_scale", "luminance_rounding", "grey_scale_limit",
        "canonical_colors", "hash_algo", "byte_frame_tag"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
