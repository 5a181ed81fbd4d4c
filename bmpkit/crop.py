"""Cropping of images to a rectangular area."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from bmpkit.image import Image

_INTEGER = re.compile(r"[+-]?[0-9]+")


class CropError(ValueError):
    """Raised for malformed crop parameters or areas outside the image."""


@dataclass(frozen=True)
class CropParams:
    """A crop area; a missing width or height means "up to the edge"."""

    offset_x: int
    offset_y: int
    width: Optional[int] = None
    height: Optional[int] = None


def _parse_int(text: str) -> Optional[int]:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def parse_crop_params(text: str) -> CropParams:
    """Parse ``OffsetX-OffsetY[-Width-Height]`` into crop parameters."""
    parts = text.split("-")
    if len(parts) not in (2, 4):
        raise CropError(f"expected 2 or 4 values, got {len(parts)}")

    offset_x = _parse_int(parts[0])
    if offset_x is None or offset_x < 0:
        raise CropError(f"invalid OffsetX: {parts[0]}")
    offset_y = _parse_int(parts[1])
    if offset_y is None or offset_y < 0:
        raise CropError(f"invalid OffsetY: {parts[1]}")

    if len(parts) == 2:
        return CropParams(offset_x, offset_y)

    width = _parse_int(parts[2])
    if width is None or width <= 0:
        raise CropError(f"invalid Width: {parts[2]}")
    height = _parse_int(parts[3])
    if height is None or height <= 0:
        raise CropError(f"invalid Height: {parts[3]}")
    return CropParams(offset_x, offset_y, width, height)


def crop_image(image: Image, params: CropParams) -> Image:
    """Return a new image holding the area of ``image`` given by ``params``."""
    width, height = image.width, image.height
    crop_width = width - params.offset_x if params.width is None else params.width
    crop_height = height - params.offset_y if params.height is None else params.height

    if not (0 <= params.offset_x < width and 0 <= params.offset_y < height):
        raise CropError(
            f"crop offset ({params.offset_x},{params.offset_y}) out of image "
            f"bounds ({width},{height})"
        )
    if (
        crop_width <= 0
        or crop_height <= 0
        or params.offset_x + crop_width > width
        or params.offset_y + crop_height > height
    ):
        raise CropError(
            f"crop dimensions ({crop_width},{crop_height}) at offset "
            f"({params.offset_x},{params.offset_y}) exceed image bounds "
            f"({width},{height})"
        )

    rows = list(image.rows())[params.offset_y:params.offset_y + crop_height]
    pixels = [
        pixel
        for row in rows
        for pixel in row[params.offset_x:params.offset_x + crop_width]
    ]
    return Image(crop_width, crop_height, pixels)


def apply_crops(image: Image, crops: Iterable[CropParams]) -> Image:
    """Apply each crop in turn, each to the result of the one before."""
    result = image
    for params in crops:
        result = crop_image(result, params)
    return result