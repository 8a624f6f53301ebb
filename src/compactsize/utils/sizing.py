"""Encoded size calculation utilities.

This module provides functions to calculate the size of a VarUint encoding
without actually encoding the value.
"""

from __future__ import annotations

from ..exceptions import DecodeError, EncodeError
from .le import U16_MAX, U32_MAX, U64_MAX

# Largest value stored directly in the prefix byte
SINGLE_BYTE_MAX = 0xFC

PREFIX_U16 = 0xFD
PREFIX_U32 = 0xFE
PREFIX_U64 = 0xFF


def width_class(value: int) -> int:
    """Return the payload width in bits of the canonical encoding of value.

    Args:
        value: Unsigned integer to encode

    Returns:
        8, 16, 32 or 64

    Raises:
        EncodeError: If value is negative or exceeds 64 bits

    Example:
        >>> width_class(252)
        8
        >>> width_class(253)
        16
    """
    if value < 0:
        raise EncodeError(f"VarUint requires non-negative value, got {value}")
    if value <= SINGLE_BYTE_MAX:
        return 8
    if value <= U16_MAX:
        return 16
    if value <= U32_MAX:
        return 32
    if value <= U64_MAX:
        return 64
    raise EncodeError(f"Value {value} requires more than 64 bits")


def encoded_size(value: int) -> int:
    """Calculate the canonical encoded size of value in bytes.

    Example:
        >>> encoded_size(250)
        1
        >>> encoded_size(4444)
        3
    """
    bits = width_class(value)
    if bits == 8:
        return 1
    return 1 + bits // 8


def prefix_size(prefix: int) -> int:
    """Return the total encoded length implied by a prefix byte.

    Raises:
        DecodeError: If prefix is not a byte value
    """
    if prefix < 0 or prefix > 0xFF:
        raise DecodeError(f"Prefix must be a byte value, got {prefix}")
    if prefix <= SINGLE_BYTE_MAX:
        return 1
    if prefix == PREFIX_U16:
        return 3
    if prefix == PREFIX_U32:
        return 5
    return 9
