"""Main CLI entry point for zigzag_codec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

import structlog
from structlog import get_logger

from .. import __version__
from ..codec.zigzag import ZigZagCodec, get_codec
from ..exceptions import ZigZagError
from ..utils.sizing import interleaved

logger = get_logger()

WIDTH_NAMES = "8, 16, 32, 64, 128, size"


def setup_logging(*, verbose: bool = False, json_logs: bool = False) -> None:
    """Configure structlog to write to stderr.

    Args:
        verbose: Enable debug-level messages
        json_logs: Render log lines as JSON instead of console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def parse_int(text: str) -> int:
    """Parse a decimal, hex (0x), octal (0o) or binary (0b) integer literal."""
    try:
        return int(text, 0)
    except ValueError:
        raise ZigZagError(f"Invalid integer: {text!r}") from None


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zigzag-codec",
        description="zigzag-codec: signed <-> unsigned zigzag integer encoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  zigzag-codec encode -1 1 -128 --width 8    Encode signed values
  zigzag-codec decode 255 --width 8          Decode unsigned values
  zigzag-codec table --count 6               Show the zigzag ordering
  zigzag-codec --version                     Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"zigzag-codec {__version__}",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    width_parent = argparse.ArgumentParser(add_help=False)
    width_parent.add_argument(
        "--width",
        "-w",
        default="64",
        metavar="W",
        help=f"Integer width in bits ({WIDTH_NAMES}); default 64",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser(
        "encode", parents=[width_parent], help="Zigzag-encode signed integers"
    )
    encode_parser.add_argument("values", nargs="+", metavar="VALUE", help="Signed integers")

    decode_parser = subparsers.add_parser(
        "decode", parents=[width_parent], help="Zigzag-decode unsigned integers"
    )
    decode_parser.add_argument("values", nargs="+", metavar="VALUE", help="Unsigned integers")

    table_parser = subparsers.add_parser(
        "table", parents=[width_parent], help="Print signed -> unsigned pairs in zigzag order"
    )
    table_parser.add_argument(
        "--count", "-n", type=int, default=10, help="Number of rows to print (default: 10)"
    )

    return parser


def _convert(codec: ZigZagCodec, values: Sequence[str], func: Callable[[int], int]) -> None:
    results = [func(parse_int(text)) for text in values]
    logger.debug("converted values", width=codec.bits, count=len(results))
    for result in results:
        print(result)


def run_encode(args: argparse.Namespace) -> None:
    codec = get_codec(args.width)
    _convert(codec, args.values, codec.encode)


def run_decode(args: argparse.Namespace) -> None:
    codec = get_codec(args.width)
    _convert(codec, args.values, codec.decode)


def run_table(args: argparse.Namespace) -> None:
    codec = get_codec(args.width)
    if args.count < 0:
        raise ZigZagError(f"--count must be non-negative, got {args.count}")

    # Clamp to the width's domain so the table never runs past MIN/MAX
    count = min(args.count, codec.width.unsigned_max + 1)
    logger.debug("printing table", width=codec.bits, rows=count)
    for value in interleaved(count):
        print(f"{value} -> {codec.encode(value)}")


COMMANDS: dict[str, Callable[[argparse.Namespace], None]] = {
    "encode": run_encode,
    "decode": run_decode,
    "table": run_table,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the zigzag-codec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, json_logs=args.json_logs)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("running command", command=args.command, width=args.width)
    try:
        COMMANDS[args.command](args)
    except ZigZagError as e:
        logger.debug("command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
