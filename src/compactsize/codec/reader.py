"""Byte-oriented reader for binary streams.

This module wraps a binary stream (or an in-memory buffer) and provides
read-exactly-N and little-endian integer reads with error propagation.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Union

from ..exceptions import DecodeError, TruncatedDataError
from ..utils.le import bytes_to_u16, bytes_to_u32, bytes_to_u64

ByteSource = Union["ByteReader", BinaryIO, bytes, bytearray, memoryview]


class ByteReader:
    """Reads exact byte counts from a binary stream.

    Short reads and I/O failures never yield partial data: a short read
    raises TruncatedDataError and an OSError from the stream is re-raised as
    DecodeError.

    Example:
        >>> reader = ByteReader(b"\\xfd\\x5c\\x11")
        >>> reader.read_u8()
        253
        >>> reader.read_u16_le()
        4444
    """

    def __init__(self, stream: BinaryIO | bytes | bytearray | memoryview) -> None:
        """Initialize a reader over a stream or bytes-like buffer.

        Args:
            stream: Object with a ``read(n)`` method, or bytes-like data
        """
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(bytes(stream))
        self._stream = stream
        self._position = 0

    @classmethod
    def wrap(cls, source: ByteSource) -> ByteReader:
        """Return source itself if it is already a ByteReader, else wrap it."""
        if isinstance(source, ByteReader):
            return source
        return cls(source)

    def read_exact(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the stream

        Raises:
            TruncatedDataError: If the stream ends first
            DecodeError: If the stream raises OSError or has no data ready
                (non-blocking ``read`` returning None)
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")

        result = bytearray()
        # Raw streams may legally return fewer bytes than asked for
        while len(result) < num_bytes:
            try:
                chunk = self._stream.read(num_bytes - len(result))
            except OSError as e:
                raise DecodeError(f"I/O error after {self._position + len(result)} bytes: {e}") from e
            if chunk is None:
                # Non-blocking stream with no data ready; not end of stream
                raise DecodeError(
                    f"Stream would block: need {num_bytes}, have {len(result)} "
                    f"(at offset {self._position})"
                )
            if not chunk:
                raise TruncatedDataError(
                    f"Not enough bytes: need {num_bytes}, have {len(result)} "
                    f"(at offset {self._position})"
                )
            result.extend(chunk)

        self._position += num_bytes
        return bytes(result)

    def read_u8(self) -> int:
        """Read a single unsigned byte."""
        return self.read_exact(1)[0]

    def read_u16_le(self) -> int:
        """Read a little-endian unsigned 16-bit integer."""
        return bytes_to_u16(self.read_exact(2))

    def read_u32_le(self) -> int:
        """Read a little-endian unsigned 32-bit integer."""
        return bytes_to_u32(self.read_exact(4))

    def read_u64_le(self) -> int:
        """Read a little-endian unsigned 64-bit integer."""
        return bytes_to_u64(self.read_exact(8))

    def position(self) -> int:
        """Return the number of bytes consumed through this reader."""
        return self._position
