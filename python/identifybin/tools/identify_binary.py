#!/usr/bin/env python3
"""
Binary identification CLI tool.

Prints the operating system, architecture and byte order of each binary,
given as a local path or an HTTP(S) URL.

Usage:
    python -m identifybin.tools.identify_binary <binary|url> [...] [--json] [--verbose]
"""

import argparse
import json
import logging
import sys

from identifybin import (
    DEFAULT_HEADER_BYTES,
    DEFAULT_TIMEOUT,
    BinaryIdentificationError,
    BinaryType,
    detect_os_and_arch,
)


def identify_source(
    source: str,
    byte_count: int = DEFAULT_HEADER_BYTES,
    timeout: float = DEFAULT_TIMEOUT,
    as_json: bool = False,
) -> BinaryType | None:
    """Identify one source and print the outcome.

    Args:
        source: Path or URL of the binary
        byte_count: Leading bytes to read or download
        timeout: Download timeout in seconds
        as_json: Print a JSON object instead of a text line

    Returns:
        The BinaryType, or None if the source could not be identified
    """
    try:
        result = detect_os_and_arch(source, byte_count=byte_count, timeout=timeout)
    except (BinaryIdentificationError, OSError) as e:
        print(f"{source}: ERROR: {e}", file=sys.stderr)
        return None

    if as_json:
        print(json.dumps({"source": source, **result.to_dict()}))
    else:
        print(f"{source}: {result}")
    return result


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Identify the OS, architecture and endianness of executable binaries"
    )
    parser.add_argument(
        "sources", nargs="+", metavar="binary", help="Path or HTTP(S) URL of a binary"
    )
    parser.add_argument(
        "--bytes",
        type=_positive_int,
        default=DEFAULT_HEADER_BYTES,
        dest="byte_count",
        help=f"Leading bytes to read or download (default: {DEFAULT_HEADER_BYTES})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Download timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print one JSON object per binary"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failed = 0
    for source in args.sources:
        if identify_source(source, args.byte_count, args.timeout, args.json) is None:
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
