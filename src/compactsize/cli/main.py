"""Main CLI entry point for compactsize."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec import VarUint
from ..config import CodecConfig
from ..exceptions import CompactSizeError
from ..utils.le import to_hex

logger = logging.getLogger(__name__)

_CONSTRUCTORS = {
    8: VarUint.from_u8,
    16: VarUint.from_u16,
    32: VarUint.from_u32,
    64: VarUint.from_u64,
}


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _parse_hex(text: str) -> bytes:
    cleaned = text.lower().removeprefix("0x").replace(" ", "").replace(":", "")
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the compactsize command."""
    parser = argparse.ArgumentParser(
        prog="compactsize",
        description="compactsize: CompactSize variable-length integer codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  compactsize encode 4444               Encode with the smallest width
  compactsize encode 515 --width 32     Encode with an explicit width
  compactsize decode fd5c11             Decode a hex string
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"compactsize {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostics (default: WARNING)",
    )
    parser.add_argument(
        "--threshold",
        type=_parse_int,
        default=999_999,
        help="Report values above this as potentially malformed (default: 999999)",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode an integer")
    encode_parser.add_argument("value", type=_parse_int, help="Unsigned integer (decimal or 0x hex)")
    encode_parser.add_argument(
        "--width",
        type=int,
        choices=sorted(_CONSTRUCTORS),
        help="Force a width class instead of the smallest one",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode a hex-encoded VarUint")
    decode_parser.add_argument("data", type=_parse_hex, help="Encoded bytes as hex")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the compactsize CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = CodecConfig(large_value_threshold=args.threshold)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "encode":
            if args.width is None:
                varuint = VarUint.from_int(args.value, config=config)
            else:
                varuint = _CONSTRUCTORS[args.width](args.value, config=config)
            print(to_hex(varuint.to_bytes()))
        else:
            logger.debug("Decoding %d bytes: %s", len(args.data), to_hex(args.data))
            varuint = VarUint.from_bytes(args.data, config=config)
            print(f"{varuint} ({varuint.size} bytes)")
    except CompactSizeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
