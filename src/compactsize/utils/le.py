"""Little-endian integer conversion helpers.

Fixed-width conversions between unsigned integers and their little-endian
byte form, plus the hex dump used in diagnostic messages.
"""

from __future__ import annotations

import struct

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


def _pack(fmt: struct.Struct, value: int, max_value: int) -> bytes:
    if value < 0 or value > max_value:
        raise ValueError(f"Value {value} out of range for {fmt.size * 8}-bit field (max: {max_value})")
    return fmt.pack(value)


def _unpack(fmt: struct.Struct, data: bytes) -> int:
    if len(data) != fmt.size:
        raise ValueError(f"Expected {fmt.size} bytes, got {len(data)}")
    return int(fmt.unpack(data)[0])


def u16_to_bytes(value: int) -> bytes:
    """Convert an unsigned 16-bit integer to 2 little-endian bytes.

    Raises:
        ValueError: If value is outside 0..0xFFFF
    """
    return _pack(_U16, value, U16_MAX)


def u32_to_bytes(value: int) -> bytes:
    """Convert an unsigned 32-bit integer to 4 little-endian bytes.

    Raises:
        ValueError: If value is outside 0..0xFFFFFFFF
    """
    return _pack(_U32, value, U32_MAX)


def u64_to_bytes(value: int) -> bytes:
    """Convert an unsigned 64-bit integer to 8 little-endian bytes.

    Raises:
        ValueError: If value is outside 0..2**64 - 1
    """
    return _pack(_U64, value, U64_MAX)


def bytes_to_u16(data: bytes) -> int:
    """Read an unsigned 16-bit integer from exactly 2 little-endian bytes."""
    return _unpack(_U16, data)


def bytes_to_u32(data: bytes) -> int:
    """Read an unsigned 32-bit integer from exactly 4 little-endian bytes."""
    return _unpack(_U32, data)


def bytes_to_u64(data: bytes) -> int:
    """Read an unsigned 64-bit integer from exactly 8 little-endian bytes."""
    return _unpack(_U64, data)


def to_hex(data: bytes) -> str:
    """Return a lower-case hex dump of data without separators.

    Example:
        >>> to_hex(b"\\xfd\\x5c\\x11")
        'fd5c11'
    """
    return bytes(data).hex()
