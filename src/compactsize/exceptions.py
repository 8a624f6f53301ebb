"""Exception hierarchy for compactsize.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CompactSizeError for easy catching of any
compactsize-specific error.
"""

from __future__ import annotations


class CompactSizeError(Exception):
    """Base exception for all compactsize errors."""

    pass


class EncodeError(CompactSizeError):
    """Raised when a value cannot be encoded.

    Examples:
        - Negative value
        - Value too large for the requested width class
        - Value above 255 passed to the 8-bit constructor
    """

    pass


class DecodeError(CompactSizeError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - I/O failure while reading the source
        - Unrecognised prefix byte
    """

    pass


class TruncatedDataError(DecodeError):
    """Raised when the source runs out of bytes before a value is complete."""

    pass


class InvalidDataError(DecodeError):
    """Raised when the bytes read do not form a valid VarUint."""

    pass
