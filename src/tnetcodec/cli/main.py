"""Main CLI entry point for tnetcodec."""

from __future__ import annotations

import argparse
import logging
import sys

from ..cli.analyze import analyze_bytes, check_bytes, read_input
from ..exceptions import FormatError


def main() -> int:
    """Main entry point for the tnetcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="tnetcodec: tnetstring codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tnetcodec --analyze dump.tnet         List every unit in a file
  tnetcodec --check - < dump.tnet       Validate units read from stdin
  tnetcodec --version                   Show version
        """,
    )

    command = parser.add_mutually_exclusive_group()

    command.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Decode every unit in FILE ('-' for stdin) and print a summary",
    )

    command.add_argument(
        "--check",
        metavar="FILE",
        type=str,
        help="Exit 0 if FILE ('-' for stdin) is a clean sequence of units, 1 otherwise",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="tnetcodec 0.1.0",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    target = args.analyze or args.check
    if target is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    try:
        data = read_input(target)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.analyze:
            analyze_bytes(data)
        else:
            count = check_bytes(data)
            print(f"OK: {count} unit{'s' if count != 1 else ''}")
        return 0
    except FormatError as e:
        print(f"Error: malformed tnetstring: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
