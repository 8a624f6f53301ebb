"""Utility functions for compactsize.

This module provides little-endian conversions and size calculation.
"""

from __future__ import annotations

from .le import (
    bytes_to_u16,
    bytes_to_u32,
    bytes_to_u64,
    to_hex,
    u16_to_bytes,
    u32_to_bytes,
    u64_to_bytes,
)
from .sizing import encoded_size, prefix_size, width_class

__all__ = [
    # Byte order
    "u16_to_bytes",
    "u32_to_bytes",
    "u64_to_bytes",
    "bytes_to_u16",
    "bytes_to_u32",
    "bytes_to_u64",
    "to_hex",
    # Sizing functions
    "encoded_size",
    "prefix_size",
    "width_class",
]
