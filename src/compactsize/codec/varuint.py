"""VarUint (CompactSize) value object.

This module provides the VarUint model together with the encode() and
decode() helpers. The wire format uses the first byte as a size
discriminator:

- 0x00-0xFC: the byte is the value (1 byte total)
- 0xFD: little-endian u16 follows (3 bytes total)
- 0xFE: little-endian u32 follows (5 bytes total)
- 0xFF: little-endian u64 follows (9 bytes total)
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError, InvalidDataError
from ..utils.le import (
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    to_hex,
    u16_to_bytes,
    u32_to_bytes,
    u64_to_bytes,
)
from ..utils.sizing import (
    PREFIX_U16,
    PREFIX_U32,
    PREFIX_U64,
    SINGLE_BYTE_MAX,
    prefix_size,
    width_class,
)
from .reader import ByteReader, ByteSource

logger = logging.getLogger(__name__)


def _require_uint(value: int, max_value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise EncodeError(f"{bits}-bit VarUint requires an int, got {type(value).__name__}")
    if value < 0 or value > max_value:
        raise EncodeError(f"Value {value} out of range for {bits}-bit VarUint (max: {max_value})")


class VarUint(BaseModel):
    """Variable-length unsigned integer, also known as CompactSize.

    Instances are immutable and are normally created through one of the
    width-specific constructors or by parsing a stream. Direct construction
    is validated: ``encoded`` must agree with ``value``.

    Example:
        ```python
        from compactsize import VarUint

        v = VarUint.from_u16(4444)
        assert v.to_bytes() == b"\\xfd\\x5c\\x11"
        assert str(v) == "4444"

        parsed = VarUint.read_from(b"\\xfe\\x55\\xa1\\xae\\xc6")
        assert parsed.value == 3333333333
        ```
    """

    model_config = ConfigDict(frozen=True, strict=True)

    value: int = Field(ge=0, le=U64_MAX)
    encoded: bytes = Field(min_length=1, max_length=9)

    @model_validator(mode="after")
    def _check_encoding(self) -> VarUint:
        if len(self.encoded) == 1:
            if self.encoded[0] != self.value:
                raise ValueError(f"encoded bytes 0x{to_hex(self.encoded)} do not represent {self.value}")
            return self

        expected_length = prefix_size(self.encoded[0])
        if len(self.encoded) != expected_length:
            raise ValueError(
                f"prefix 0x{self.encoded[0]:02x} requires {expected_length} bytes, "
                f"got {len(self.encoded)}"
            )
        if int.from_bytes(self.encoded[1:], "little") != self.value:
            raise ValueError(f"encoded bytes 0x{to_hex(self.encoded)} do not represent {self.value}")
        return self

    @classmethod
    def _build(cls, value: int, encoded: bytes, config: Optional[CodecConfig]) -> VarUint:
        """Construct a VarUint and run the large-value diagnostic."""
        varuint = cls(value=value, encoded=encoded)

        config = config or DEFAULT_CONFIG
        if config.is_suspicious(varuint.value):
            message = "Potential malformed value detected: %10d, len: %5d, buf: 0x%s" % (
                varuint.value,
                len(varuint.encoded),
                to_hex(varuint.encoded),
            )
            sink = config.sink or logger.warning
            sink(message)

        return varuint

    @classmethod
    def from_u8(cls, value: int, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Create a single-byte VarUint.

        Values 253-255 are accepted and stored as the bare byte, which a
        reader interprets as a width marker. Use from_int() for the
        canonical encoding.

        Args:
            value: Integer in 0..255
            config: Diagnostic configuration (default: DEFAULT_CONFIG)

        Raises:
            EncodeError: If value is outside 0..255
        """
        _require_uint(value, U8_MAX, 8)
        return cls._build(value, bytes([value]), config)

    @classmethod
    def from_u16(cls, value: int, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Create a 3-byte VarUint (0xFD prefix + little-endian u16)."""
        _require_uint(value, U16_MAX, 16)
        return cls._build(value, bytes([PREFIX_U16]) + u16_to_bytes(value), config)

    @classmethod
    def from_u32(cls, value: int, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Create a 5-byte VarUint (0xFE prefix + little-endian u32)."""
        _require_uint(value, U32_MAX, 32)
        return cls._build(value, bytes([PREFIX_U32]) + u32_to_bytes(value), config)

    @classmethod
    def from_u64(cls, value: int, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Create a 9-byte VarUint (0xFF prefix + little-endian u64)."""
        _require_uint(value, U64_MAX, 64)
        return cls._build(value, bytes([PREFIX_U64]) + u64_to_bytes(value), config)

    @classmethod
    def from_int(cls, value: int, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Create the canonical (smallest width) VarUint for value.

        Raises:
            EncodeError: If value is not an int, is negative, or exceeds 64 bits
        """
        _require_uint(value, U64_MAX, 64)
        constructors = {
            8: cls.from_u8,
            16: cls.from_u16,
            32: cls.from_u32,
            64: cls.from_u64,
        }
        return constructors[width_class(value)](value, config=config)

    @classmethod
    def read_from(cls, source: ByteSource, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Parse one VarUint from a byte source.

        Args:
            source: ByteReader, binary stream with ``read(n)``, or bytes-like data
            config: Diagnostic configuration (default: DEFAULT_CONFIG)

        Returns:
            Parsed VarUint, keeping the width class found on the wire

        Raises:
            TruncatedDataError: If the source ends before the value is complete
            DecodeError: If the source raises an I/O error
            InvalidDataError: If the prefix byte is not recognised
        """
        reader = ByteReader.wrap(source)
        prefix = reader.read_u8()

        if prefix <= SINGLE_BYTE_MAX:
            return cls.from_u8(prefix, config=config)
        if prefix == PREFIX_U16:
            return cls.from_u16(reader.read_u16_le(), config=config)
        if prefix == PREFIX_U32:
            return cls.from_u32(reader.read_u32_le(), config=config)
        if prefix == PREFIX_U64:
            return cls.from_u64(reader.read_u64_le(), config=config)

        # Unreachable while the branches above cover 0x00-0xFF
        raise InvalidDataError(f"Invalid VarUint prefix 0x{prefix:02x}")

    @classmethod
    def from_bytes(cls, data: bytes, *, config: Optional[CodecConfig] = None) -> VarUint:
        """Decode exactly one VarUint from data.

        Raises:
            DecodeError: If data is truncated or has trailing bytes
        """
        reader = ByteReader(data)
        varuint = cls.read_from(reader, config=config)
        if reader.position() != len(data):
            raise InvalidDataError(
                f"{len(data) - reader.position()} trailing bytes after {varuint.size}-byte VarUint"
            )
        return varuint

    @property
    def size(self) -> int:
        """Length of the encoded form in bytes."""
        return len(self.encoded)

    def to_bytes(self) -> bytes:
        """Return the raw serialized form."""
        return bytes(self.encoded)

    def write_to(self, stream: BinaryIO) -> int:
        """Write the encoded form to a binary stream.

        Returns:
            Number of bytes written
        """
        stream.write(self.encoded)
        return len(self.encoded)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"VarUint(value={self.value}, encoded=0x{to_hex(self.encoded)})"


def encode(value: int, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode value with its canonical (smallest) width class.

    Example:
        >>> encode(515)
        b'\\xfd\\x03\\x02'
    """
    return VarUint.from_int(value, config=config).to_bytes()


def decode(
    data: bytes, offset: int = 0, *, config: Optional[CodecConfig] = None
) -> tuple[VarUint, int]:
    """Decode a VarUint from data starting at offset.

    Args:
        data: Buffer holding the encoded value
        offset: Position of the prefix byte

    Returns:
        Tuple (VarUint, offset just past the encoded value)

    Raises:
        DecodeError: If data is truncated at offset
    """
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")

    reader = ByteReader(memoryview(data)[offset:])
    varuint = VarUint.read_from(reader, config=config)
    return varuint, offset + reader.position()
