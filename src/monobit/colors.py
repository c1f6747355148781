"""
Canonical named colors (RRGGBBAA), read-only and process-wide.

Values come from the frozen parameter registry, loaded once at import.
"""

from types import MappingProxyType

from .core.registry import param_registry

NAMED_COLORS = MappingProxyType(dict(param_registry()["canonical_colors"]))
