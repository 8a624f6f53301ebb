"""compactsize: CompactSize variable-length integer codec

A Python library for the CompactSize (VarUint) encoding used in binary
protocol streams. Small values take a single byte; larger values are
prefixed with a 0xFD/0xFE/0xFF marker and stored little-endian.

Key Features:
- Immutable pydantic-based VarUint value object
- Width-specific constructors (8/16/32/64 bit) and canonical encoding
- Stream parsing with strict truncation handling
- Configurable large-value diagnostic for spotting desynchronized streams

Quick Start:
    >>> from compactsize import VarUint, encode, decode
    >>>
    >>> VarUint.from_u16(515).to_bytes()
    b'\\xfd\\x03\\x02'
    >>> encode(250)
    b'\\xfa'
    >>> value, offset = decode(b"\\xfe\\x55\\xa1\\xae\\xc6")
    >>> value.value, offset
    (3333333333, 5)
"""

from __future__ import annotations

from .codec import ByteReader, VarUint, decode, encode
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    CompactSizeError,
    DecodeError,
    EncodeError,
    InvalidDataError,
    TruncatedDataError,
)
from .utils import encoded_size, prefix_size, to_hex, width_class

__version__ = "0.1.0"

__all__ = [
    # Core API
    "VarUint",
    "encode",
    "decode",
    "ByteReader",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "CompactSizeError",
    "EncodeError",
    "DecodeError",
    "TruncatedDataError",
    "InvalidDataError",
    # Sizing
    "encoded_size",
    "prefix_size",
    "width_class",
    "to_hex",
    # Version
    "__version__",
]
