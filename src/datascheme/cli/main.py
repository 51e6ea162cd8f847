"""Main CLI entry point for datascheme."""

from __future__ import annotations

import argparse
import binascii
import sys
from pathlib import Path
from pprint import pformat

from .. import __version__
from ..cli.analyze import analyze_file, find_scheme, load_module


def main() -> int:
    """Main entry point for the datascheme CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="datascheme: binary buffer layouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  datascheme --analyze layouts.py                        Show layout sizes
  datascheme --file layouts.py --scheme HEADER --decode 0102
                                                         Decode hex input
  datascheme --version                                   Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze layouts defined in a Python file",
    )

    parser.add_argument("--file", metavar="FILE", type=str, help="Python file defining layouts")
    parser.add_argument("--scheme", metavar="NAME", type=str, help="Layout name inside --file")
    parser.add_argument("--decode", metavar="HEX", type=str, help="Hex-encoded bytes to decode")

    parser.add_argument(
        "--version",
        action="version",
        version=f"datascheme {__version__}",
    )

    args = parser.parse_args()

    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    if args.decode is not None:
        if not args.file or not args.scheme:
            print("Error: --decode requires --file and --scheme", file=sys.stderr)
            return 1
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            data = binascii.unhexlify(args.decode.replace(" ", ""))
        except (binascii.Error, ValueError) as e:
            print(f"Error: invalid hex input: {e}", file=sys.stderr)
            return 1

        try:
            scheme = find_scheme(load_module(file_path), args.scheme)
            print(pformat(scheme.decode(data)))
            return 0
        except Exception as e:
            print(f"Error decoding: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
