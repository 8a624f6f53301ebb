"""Unit tests for the large-value diagnostic."""

from __future__ import annotations

import logging

import pytest

from compactsize import DEFAULT_CONFIG, CodecConfig, VarUint


class TestCodecConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        """Test default threshold and sink."""
        assert DEFAULT_CONFIG.large_value_threshold == 999_999
        assert DEFAULT_CONFIG.sink is None

    def test_negative_threshold(self) -> None:
        """Test negative thresholds are rejected."""
        with pytest.raises(ValueError, match="large_value_threshold"):
            CodecConfig(large_value_threshold=-1)

    def test_is_suspicious(self) -> None:
        """Test the threshold is exclusive."""
        config = CodecConfig(large_value_threshold=10)
        assert not config.is_suspicious(10)
        assert config.is_suspicious(11)
        assert not CodecConfig(large_value_threshold=None).is_suspicious(2**64 - 1)


class TestDiagnosticSink:
    """Test diagnostic reporting during construction."""

    def test_below_threshold_silent(self, collecting_config, diagnostics) -> None:
        """Test values at the threshold are not reported."""
        VarUint.from_u32(999_999, config=collecting_config)
        assert diagnostics == []

    def test_above_threshold_reported(self, collecting_config, diagnostics) -> None:
        """Test the message carries value, length and hex dump."""
        v = VarUint.from_u32(3333333333, config=collecting_config)

        assert v.value == 3333333333
        assert diagnostics == [
            "Potential malformed value detected: 3333333333, len:     5, buf: 0xfe55a1aec6"
        ]

    def test_reported_while_parsing(self, collecting_config, diagnostics) -> None:
        """Test parsing reports through the same sink."""
        VarUint.read_from(b"\xff\x00\x00\x84\xe2\x50\x6c\xe6\x7c", config=collecting_config)
        assert len(diagnostics) == 1
        assert "9000000000000000000" in diagnostics[0]
        assert "len:     9" in diagnostics[0]

    def test_custom_threshold(self, diagnostics) -> None:
        """Test a lower threshold reports smaller values."""
        config = CodecConfig(large_value_threshold=100, sink=diagnostics.append)
        VarUint.from_u8(100, config=config)
        VarUint.from_u8(101, config=config)
        assert len(diagnostics) == 1
        assert diagnostics[0].startswith("Potential malformed value detected:        101")

    def test_disabled(self, diagnostics) -> None:
        """Test a None threshold disables reporting."""
        config = CodecConfig(large_value_threshold=None, sink=diagnostics.append)
        VarUint.from_u64(2**64 - 1, config=config)
        assert diagnostics == []

    def test_default_sink_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the default sink is the module logger."""
        with caplog.at_level(logging.WARNING, logger="compactsize.codec.varuint"):
            VarUint.from_u16(4444)
            VarUint.from_u32(1_000_000)

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.name == "compactsize.codec.varuint"
        assert "1000000" in record.getMessage()
