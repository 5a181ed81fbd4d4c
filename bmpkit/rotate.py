"""Rotation of images by multiples of 90 degrees."""

from __future__ import annotations

from typing import Iterable

from bmpkit.image import Image

_ROTATIONS = {
    "right": 90,
    "90": 90,
    "left": -90,
    "-90": -90,
    "180": 180,
    "-180": 180,
    "270": 270,
    "-270": -270,
}


class RotationError(ValueError):
    """Raised for an unknown rotation option."""


def is_valid_rotation(option: str) -> bool:
    """Tell whether ``option`` names a supported rotation."""
    return option.lower() in _ROTATIONS


def normalize_rotation(rotation: str) -> int:
    """Turn a rotation option into an angle in degrees, clockwise."""
    key = rotation.lower()
    try:
        return _ROTATIONS[key]
    except KeyError:
        raise RotationError(f"Invalid rotation: {key}") from None


def rotate_image(image: Image, angle: int) -> Image:
    """Return ``image`` rotated clockwise by ``angle`` degrees.

    Angles that are not a multiple of 90 leave the image as it is.
    """
    angle %= 360
    rows = [list(row) for row in image.rows()]
    if angle == 90:
        new_rows = zip(*reversed(rows))
        width, height = image.height, image.width
    elif angle == 270:
        new_rows = reversed(list(zip(*rows)))
        width, height = image.height, image.width
    elif angle == 180:
        new_rows = (row[::-1] for row in reversed(rows))
        width, height = image.width, image.height
    else:
        new_rows = rows
        width, height = image.width, image.height
    return Image(width, height, [pixel for row in new_rows for pixel in row])


def apply_rotations(image: Image, rotations: Iterable[str]) -> Image:
    """Apply each rotation in turn and return the resulting image."""
    result = Image(image.width, image.height, list(image.pixels))
    for rotation in rotations:
        result = rotate_image(result, normalize_rotation(rotation))
    return result