"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

from compactsize.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "compactsize.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "compactsize: CompactSize variable-length integer codec" in result.stdout
    assert "encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "compactsize.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "compactsize 0.1.0" in result.stdout


def test_cli_encode(capsys) -> None:
    """Test encoding with the smallest width."""
    assert main(["encode", "4444"]) == 0
    assert capsys.readouterr().out.strip() == "fd5c11"


def test_cli_encode_width(capsys) -> None:
    """Test encoding with an explicit width."""
    assert main(["encode", "515", "--width", "32"]) == 0
    assert capsys.readouterr().out.strip() == "fe03020000"


def test_cli_encode_hex_input(capsys) -> None:
    """Test integer arguments accept 0x notation."""
    assert main(["encode", "0xfa"]) == 0
    assert capsys.readouterr().out.strip() == "fa"


def test_cli_encode_out_of_range(capsys) -> None:
    """Test out-of-range values exit with an error."""
    assert main(["encode", "70000", "--width", "16"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_decode(capsys) -> None:
    """Test decoding a hex string."""
    assert main(["decode", "fe55a1aec6"]) == 0
    assert capsys.readouterr().out.strip() == "3333333333 (5 bytes)"


def test_cli_decode_truncated(capsys) -> None:
    """Test decoding truncated input."""
    assert main(["decode", "0xfd5c"]) == 1
    assert "Not enough bytes" in capsys.readouterr().err


def test_cli_decode_reports_large_value() -> None:
    """Test the diagnostic reaches stderr through logging."""
    result = subprocess.run(
        [sys.executable, "-m", "compactsize.cli.main", "--threshold", "100", "decode", "fd5c11"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "4444 (3 bytes)"
    assert "Potential malformed value detected" in result.stderr
