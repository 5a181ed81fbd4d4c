"""The ``apply`` command: crop, mirror, rotate and filter a BMP file."""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Sequence, Tuple

from bmpkit.crop import CropError, apply_crops, parse_crop_params
from bmpkit.filters import apply_filters
from bmpkit.image import read_bmp, write_bmp
from bmpkit.mirror import MirrorError, apply_mirrors
from bmpkit.rotate import RotationError, apply_rotations
from bmpkit.usage import print_apply_usage

_OPTIONS = ("filter", "mirror", "rotate", "crop")


class ApplyError(Exception):
    """Raised when the ``apply`` command cannot complete."""


class _FlagError(ValueError):
    pass


def normalize_flags(args: Iterable[str]) -> List[str]:
    """Turn a leading ``---`` on any argument into ``--``."""
    return [
        arg.replace("---", "--", 1) if arg.startswith("---") else arg
        for arg in args
    ]


def _parse_flags(args: Sequence[str]) -> Tuple[Dict[str, List[str]], List[str]]:
    """Collect repeated option values and return them with the positional rest."""
    values: Dict[str, List[str]] = {name: [] for name in _OPTIONS}
    remaining = list(args)
    while remaining:
        arg = remaining[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        remaining.pop(0)
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise _FlagError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")
        if name not in values:
            if name in ("h", "help"):
                raise _FlagError("flag: help requested")
            raise _FlagError(f"flag provided but not defined: -{name}")
        if not has_value:
            if not remaining:
                raise _FlagError(f"flag needs an argument: -{name}")
            value = remaining.pop(0)
        values[name].append(value)
    return values, remaining


def handle_apply_command(args: Sequence[str]) -> None:
    """Run ``apply`` with the arguments that follow the command name."""
    try:
        options, positional = _parse_flags(normalize_flags(args))
    except _FlagError as exc:
        print_apply_usage()
        raise ApplyError(f"error parsing flags: {exc}") from None

    if len(positional) != 2:
        print_apply_usage()
        raise ApplyError("expected source and output files")

    filters = options["filter"]
    mirrors = options["mirror"]
    rotations = options["rotate"]
    crops = options["crop"]
    if not (filters or rotations or mirrors or crops):
        print_apply_usage()
        raise ApplyError("no transformations specified")

    source, output = positional
    if not os.path.exists(source):
        raise ApplyError(f"source file {source} does not exist")
    directory = os.path.dirname(output)
    if directory not in ("", ".") and not os.path.exists(directory):
        raise ApplyError(f"output directory {directory} does not exist")

    bmp = read_bmp(source)

    if crops:
        try:
            params = [parse_crop_params(text) for text in crops]
        except CropError as exc:
            raise ApplyError(f"invalid crop parameters: {exc}") from None
        try:
            bmp.image = apply_crops(bmp.image, params)
        except CropError as exc:
            raise ApplyError(f"failed to apply crops: {exc}") from None

    if mirrors:
        try:
            apply_mirrors(bmp.image, mirrors)
        except MirrorError as exc:
            raise ApplyError(f"failed to apply mirrors: {exc}") from None

    if rotations:
        try:
            bmp.image = apply_rotations(bmp.image, rotations)
        except RotationError as exc:
            raise ApplyError(str(exc)) from None

    bmp.header.width = bmp.image.width
    bmp.header.height = bmp.image.height

    if filters:
        apply_filters(bmp.image, filters)

    write_bmp(output, bmp)