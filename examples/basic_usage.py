#!/usr/bin/env python3
"""Basic usage example for compactsize.

This example demonstrates:
1. Encoding values with each width class
2. Parsing VarUints from a byte stream
3. Routing large-value diagnostics to a custom sink
"""

from __future__ import annotations

import io

from compactsize import CodecConfig, TruncatedDataError, VarUint, encode, encoded_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("compactsize Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding values...")
    for value in (250, 4444, 3333333333, 9000000000000000000):
        data = encode(value)
        print(f"   {value:>20} -> {data.hex()} ({encoded_size(value)} bytes)")
    print()

    print("2. Parsing a stream of values...")
    stream = io.BytesIO(bytes.fromhex("fafd5c11fe55a1aec6"))
    for _ in range(3):
        varuint = VarUint.read_from(stream)
        print(f"   {varuint!r}")
    print()

    print("3. Handling truncated input...")
    try:
        VarUint.read_from(bytes.fromhex("fd5c"))
    except TruncatedDataError as e:
        print(f"   Decode failed: {e}")
    print()

    print("4. Collecting diagnostics...")
    messages: list[str] = []
    config = CodecConfig(large_value_threshold=1000, sink=messages.append)
    VarUint.from_u16(4444, config=config)
    for message in messages:
        print(f"   {message}")


if __name__ == "__main__":
    main()
