"""
hexstream - Command Line

Streams standard input to standard output as hex text, or back.

Usage:
    hexstream [-w WIDTH] < infile > outfile.hex
    hexstream -d < infile.hex > outfile
"""

import argparse
import sys
import time

from .core.config import Config
from .core.errors import ConfigError, StreamError
from .core.instrumented_io import CountingSink, CountingSource
from .core.pipeline import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexstream",
        usage="%(prog)s [OPTIONS] < infile > outfile",
        description="Convert binary data to hex text and back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode, 64 hex characters per line
  hexstream -w 64 < firmware.bin > firmware.hex

  # Decode (whitespace and line breaks in the input are ignored)
  hexstream -d < firmware.hex > firmware.bin
""",
    )
    parser.add_argument(
        "-d", "--decode", action="store_true", help="Decode mode (hex -> binary)"
    )
    parser.add_argument(
        "-w",
        "--wrap",
        type=int,
        default=0,
        metavar="WIDTH",
        help="Wrap width when encoding (0 for no wrapping, default: 0)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't print the completion report",
    )
    return parser


def format_duration(seconds: float) -> str:
    """
    Human-readable elapsed time.

    Example:
        >>> format_duration(0.0042)
        '4.200ms'
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m{secs:.3f}s"


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_flags(decode=args.decode, wrap=args.wrap)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)

    source = CountingSource(sys.stdin.buffer)
    sink = CountingSink(sys.stdout.buffer)

    start = time.perf_counter()
    try:
        run(config, source, sink)
        sink.flush()
    except (StreamError, OSError) as e:
        # OSError here comes from the final stdout flush
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start

    if not args.quiet:
        print(
            f"\nProcess completed in {format_duration(elapsed)} "
            f"({source.bytes_read} bytes in, {sink.bytes_written} bytes out)\n",
            file=sys.stderr,
        )


if __name__ == "__main__":
    main()
