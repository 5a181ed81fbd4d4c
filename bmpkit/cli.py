"""Command-line entry point for inspecting and transforming BMP files."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from bmpkit.apply import ApplyError, handle_apply_command
from bmpkit.image import BmpError, format_header, read_header
from bmpkit.usage import print_header_usage, print_usage


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def handle_header_command(args: Sequence[str]) -> int:
    """Print the header of the single BMP file named in ``args``."""
    if len(args) < 1:
        print_header_usage()
        return _fail("Error: no input file")
    if len(args) > 1:
        print_header_usage()
        return _fail("Error: too many arguments")
    try:
        header = read_header(args[0])
    except BmpError as exc:
        return _fail(str(exc))
    print(format_header(header))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage()
        return 1
    command, rest = args[0], args[1:]
    if command == "header":
        return handle_header_command(rest)
    if command == "apply":
        try:
            handle_apply_command(rest)
        except (ApplyError, BmpError) as exc:
            return _fail(str(exc))
        return 0
    print_usage()
    return _fail(f"Unknown command: {command}")


if __name__ == "__main__":
    sys.exit(main())