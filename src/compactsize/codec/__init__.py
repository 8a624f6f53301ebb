"""CompactSize codec for compactsize.

This module provides the VarUint value object and the stream reader it
parses from.
"""

from __future__ import annotations

from .reader import ByteReader
from .varuint import VarUint, decode, encode

__all__ = [
    "VarUint",
    "encode",
    "decode",
    "ByteReader",
]
