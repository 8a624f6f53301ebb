"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from compactsize import CodecConfig


@pytest.fixture
def diagnostics() -> list[str]:
    """Collected diagnostic messages."""
    return []


@pytest.fixture
def collecting_config(diagnostics: list[str]) -> CodecConfig:
    """Codec config that appends diagnostics to a list."""
    return CodecConfig(sink=diagnostics.append)


@pytest.fixture
def sample_stream() -> bytes:
    """Concatenation of one VarUint from each width class."""
    return (
        b"\xfa"
        + b"\xfd\x5c\x11"
        + b"\xfe\x55\xa1\xae\xc6"
        + b"\xff\x00\x00\x84\xe2\x50\x6c\xe6\x7c"
    )
