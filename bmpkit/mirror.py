"""Mirroring of images in place."""

from __future__ import annotations

from typing import Iterable, Optional

from bmpkit.image import Image

_ALIASES = {
    "h": "horizontal",
    "hor": "horizontal",
    "horizontal": "horizontal",
    "horizontally": "horizontal",
    "v": "vertical",
    "ver": "vertical",
    "vertical": "vertical",
    "vertically": "vertical",
}


class MirrorError(ValueError):
    """Raised for an unknown mirror direction."""


def normalize_mirror_flag(flag: str) -> Optional[str]:
    """Map a direction alias to ``horizontal`` or ``vertical``, else None."""
    return _ALIASES.get(flag.lower())


def mirror_horizontal(image: Image) -> None:
    """Flip the image left to right."""
    image.pixels[:] = [pixel for row in image.rows() for pixel in reversed(row)]


def mirror_vertical(image: Image) -> None:
    """Flip the image top to bottom."""
    image.pixels[:] = [pixel for row in reversed(list(image.rows())) for pixel in row]


def apply_mirrors(image: Image, directions: Iterable[str]) -> None:
    """Apply each mirror direction in turn."""
    for direction in directions:
        normalized = normalize_mirror_flag(direction)
        if normalized == "horizontal":
            mirror_horizontal(image)
        elif normalized == "vertical":
            mirror_vertical(image)
        else:
            raise MirrorError(f"invalid mirror direction: {direction}")