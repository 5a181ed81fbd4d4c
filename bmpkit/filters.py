"""Colour filters applied in place to images."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from bmpkit.image import Image, Pixel

DEFAULT_PIXELATE_BLOCK = 20
DEFAULT_BLUR_KERNEL = 20


def apply_blue_filter(image: Image) -> None:
    """Keep only the blue channel."""
    image.pixels[:] = [Pixel(p.b, 0, 0) for p in image.pixels]


def apply_red_filter(image: Image) -> None:
    """Keep only the red channel."""
    image.pixels[:] = [Pixel(0, 0, p.r) for p in image.pixels]


def apply_green_filter(image: Image) -> None:
    """Keep only the green channel."""
    image.pixels[:] = [Pixel(0, p.g, 0) for p in image.pixels]


def _gray(pixel: Pixel) -> Pixel:
    value = int(0.299 * pixel.r + 0.587 * pixel.g + 0.114 * pixel.b)
    return Pixel(value, value, value)


def apply_grayscale_filter(image: Image) -> None:
    """Replace each pixel by its luminance."""
    image.pixels[:] = [_gray(p) for p in image.pixels]


def apply_negative_filter(image: Image) -> None:
    """Invert every channel."""
    image.pixels[:] = [Pixel(255 - p.b, 255 - p.g, 255 - p.r) for p in image.pixels]


def apply_pixelate_filter(image: Image, block_size: int) -> None:
    """Fill each block of ``block_size`` square pixels with its average colour."""
    if block_size < 0:
        raise ValueError(f"Block size cannot be negative: {block_size}")
    if block_size == 0:
        return
    width, height = image.width, image.height
    pixels = image.pixels
    for top in range(0, height, block_size):
        ys = range(top, min(top + block_size, height))
        for left in range(0, width, block_size):
            xs = range(left, min(left + block_size, width))
            indices = [y * width + x for y in ys for x in xs]
            count = len(indices)
            if not count:
                continue
            block = [pixels[i] for i in indices]
            average = Pixel(
                sum(p.b for p in block) // count,
                sum(p.g for p in block) // count,
                sum(p.r for p in block) // count,
            )
            for i in indices:
                pixels[i] = average


def _summed_table(image: Image, channel: Callable[[Pixel], int]) -> List[List[int]]:
    width = image.width
    table = [[0] * (width + 1)]
    for row in image.rows():
        running = 0
        previous = table[-1]
        line = [0]
        for x, pixel in enumerate(row):
            running += channel(pixel)
            line.append(previous[x + 1] + running)
        table.append(line)
    return table


def _round_div(total: int, count: int) -> int:
    # Halves round away from zero; totals are never negative.
    return (2 * total + count) // (2 * count)


def apply_blur_filter(image: Image, kernel_size: int) -> None:
    """Box-blur the image; an even kernel size is increased by one."""
    if kernel_size < 0:
        raise ValueError(f"Kernel Size cannot be negative: {kernel_size}")
    if kernel_size % 2 == 0:
        kernel_size += 1
    half = kernel_size // 2
    width, height = image.width, image.height
    tables = [
        _summed_table(image, lambda p: p.b),
        _summed_table(image, lambda p: p.g),
        _summed_table(image, lambda p: p.r),
    ]

    def window_sum(table: List[List[int]], x0: int, y0: int, x1: int, y1: int) -> int:
        return table[y1][x1] - table[y0][x1] - table[y1][x0] + table[y0][x0]

    blurred = []
    for y in range(height):
        y0, y1 = max(0, y - half), min(height, y + half + 1)
        for x in range(width):
            x0, x1 = max(0, x - half), min(width, x + half + 1)
            count = (y1 - y0) * (x1 - x0)
            b, g, r = (_round_div(window_sum(t, x0, y0, x1, y1), count) for t in tables)
            blurred.append(Pixel(b, g, r))
    image.pixels[:] = blurred


_FILTERS: Dict[str, Callable[[Image], None]] = {
    "blue": apply_blue_filter,
    "red": apply_red_filter,
    "green": apply_green_filter,
    "grayscale": apply_grayscale_filter,
    "negative": apply_negative_filter,
    "pixelate": lambda image: apply_pixelate_filter(image, DEFAULT_PIXELATE_BLOCK),
    "blur": lambda image: apply_blur_filter(image, DEFAULT_BLUR_KERNEL),
}


def apply_filters(image: Image, filters: Iterable[str]) -> None:
    """Apply the named filters in order; unknown names are ignored."""
    for name in filters:
        action = _FILTERS.get(name)
        if action is not None:
            action(image)