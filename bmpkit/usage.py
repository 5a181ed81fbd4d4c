"""Usage messages printed by the command-line interface."""

from __future__ import annotations

import sys
from collections.abc import Iterable

_COMMANDS: tuple[tuple[str, str], ...] = (
    ("header", "prints bitmap file header information"),
    ("apply", "applies processing to the image and saves it to the file"),
)

_APPLY_OPTIONS: tuple[tuple[str, str], ...] = (
    ("-h, --help", "prints program usage information"),
    (
        "--filter=<filter_type>",
        "applies a filter to the image "
        "(blue, red, green, grayscale, negative, pixelate, blur)",
    ),
)

_COMMAND_COLUMN = 10
_OPTION_COLUMN = 24


def _table(rows: Iterable[tuple[str, str]], width: int, indent: str) -> list[str]:
    """Lay out name/description pairs with the descriptions in one column."""
    return [f"{indent}{name:<{width}}{description}" for name, description in rows]


def _emit(prompt: str, usage: str, title: str, body: list[str]) -> None:
    """Write one usage message to standard output."""
    lines = [prompt, "Usage:", usage, "", title, *body]
    sys.stdout.write("\n".join(lines) + "\n")


def print_usage() -> None:
    """Print the general usage message."""
    _emit(
        "$ ./bitmap",
        "  bitmap <command> [arguments]",
        "The commands are:",
        _table(_COMMANDS, _COMMAND_COLUMN, "  "),
    )


def print_header_usage() -> None:
    """Print the usage message of the ``header`` command."""
    _emit(
        "$ ./bitmap header --helps",
        "  bitmap header <source_file>",
        "Description:",
        ["  Prints bitmap file header information"],
    )


def print_apply_usage() -> None:
    """Print the usage message of the ``apply`` command."""
    _emit(
        "$ ./bitmap apply --help",
        "bitmap apply [options] <source_file> <output_file>",
        "The options are:",
        _table(_APPLY_OPTIONS, _OPTION_COLUMN, ""),
    )