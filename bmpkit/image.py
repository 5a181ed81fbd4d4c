"""Reading and writing uncompressed 24-bit BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

PathLike = Union[str, Path]

BITMAP_FILE_HEADER_SIZE = 14
BITMAP_INFO_HEADER_SIZE = 40
BITS_PER_PIXEL = 24

# Fields read from the start of a file: type, file size, (reserved + offset),
# DIB header size, width, height, (planes), bits per pixel, (compression),
# image size. The trailing resolution and palette fields are not needed.
_HEADER_FIELDS = struct.Struct("<2sI8xIii2xH4xI")

# The complete file header plus BITMAPINFOHEADER as written to disk.
_FULL_HEADER = struct.Struct("<2sIIIIiiHHIIiiII")


class BmpError(Exception):
    """Raised when a BMP file cannot be read or written."""


@dataclass(frozen=True)
class Pixel:
    """A single colour value, stored in the file's B, G, R order."""

    b: int = 0
    g: int = 0
    r: int = 0


@dataclass
class Image:
    """A grid of pixels stored row by row, top row first."""

    width: int
    height: int
    pixels: Optional[List[Pixel]] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"image dimensions must not be negative: {self.width}x{self.height}"
            )
        if self.pixels is None:
            self.pixels = [Pixel() for _ in range(self.width * self.height)]
        elif len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def rows(self) -> Iterator[List[Pixel]]:
        """Yield the rows of the image from top to bottom."""
        for start in range(0, self.width * self.height, self.width or 1):
            yield self.pixels[start:start + self.width]


@dataclass
class Header:
    """The fields of a BMP file header that matter for 24-bit images."""

    file_type: str = ""
    file_size: int = 0
    header_size: int = 0
    dib_header_size: int = 0
    width: int = 0
    height: int = 0
    pixel_size: int = 0
    image_size: int = 0


@dataclass
class Bitmap:
    """A BMP header together with its decoded image."""

    header: Header = field(default_factory=Header)
    image: Image = field(default_factory=lambda: Image(0, 0))


def _row_size(width: int) -> int:
    return ((width * 3 + 3) // 4) * 4


def read_header(path: PathLike) -> Header:
    """Read and validate the header of a 24-bit BMP file."""
    try:
        with open(path, "rb") as stream:
            data = stream.read(_HEADER_FIELDS.size)
    except OSError as exc:
        raise BmpError(f"Failed to open file: {exc}") from exc

    if len(data) < 2:
        raise BmpError("Failed to read file type")
    if data[:2] != b"BM":
        raise BmpError(f"{path} is not a valid BMP file")
    if len(data) < _HEADER_FIELDS.size:
        raise BmpError("Failed to read header: file is truncated")

    (file_type, file_size, dib_header_size, width, height,
     pixel_size, image_size) = _HEADER_FIELDS.unpack(data)
    if pixel_size != BITS_PER_PIXEL:
        raise BmpError("Only 24 bit BMP files are allowed")

    return Header(
        file_type=file_type.decode("latin-1"),
        file_size=file_size,
        header_size=BITMAP_FILE_HEADER_SIZE,
        dib_header_size=dib_header_size,
        width=width,
        height=height,
        pixel_size=pixel_size,
        image_size=image_size,
    )


def read_image(path: PathLike, header: Header) -> Image:
    """Decode the pixel data of a BMP file described by ``header``."""
    width, height = header.width, header.height
    if width < 0 or height < 0:
        raise BmpError(f"Unsupported image dimensions: {width}x{height}")

    row_size = ((header.pixel_size * width + 31) // 32) * 4
    if row_size < width * 3:
        raise BmpError(f"Unsupported pixel size: {header.pixel_size}")

    rows = []
    try:
        with open(path, "rb") as stream:
            stream.seek(header.header_size + header.dib_header_size)
            for _ in range(height):
                row = stream.read(row_size)
                if len(row) < row_size:
                    raise BmpError("Failed to read pixel data: file is truncated")
                rows.append(row)
    except OSError as exc:
        raise BmpError(f"Failed to open file: {exc}") from exc

    # Rows are stored bottom-up in the file.
    rows.reverse()
    pixels = []
    for row in rows:
        channels = iter(row[:width * 3])
        pixels.extend(Pixel(b, g, r) for b, g, r in zip(channels, channels, channels))
    return Image(width, height, pixels)


def read_bmp(path: PathLike) -> Bitmap:
    """Read a whole 24-bit BMP file."""
    header = read_header(path)
    return Bitmap(header=header, image=read_image(path, header))


def _prepare_header(header: Header) -> None:
    header.file_type = "BM"
    header.header_size = BITMAP_FILE_HEADER_SIZE
    header.dib_header_size = BITMAP_INFO_HEADER_SIZE
    header.pixel_size = BITS_PER_PIXEL
    header.image_size = _row_size(header.width) * header.height
    header.file_size = header.header_size + header.dib_header_size + header.image_size


def _encode(header: Header, image: Image) -> bytes:
    if (header.width, header.height) != (image.width, image.height):
        raise BmpError(
            f"Header dimensions {header.width}x{header.height} do not match "
            f"image dimensions {image.width}x{image.height}"
        )
    head = _FULL_HEADER.pack(
        header.file_type.encode("latin-1"),
        header.file_size,
        0,
        header.header_size + header.dib_header_size,
        header.dib_header_size,
        header.width,
        header.height,
        1,
        header.pixel_size,
        0,
        header.image_size,
        0,
        0,
        0,
        0,
    )
    padding = bytes(_row_size(image.width) - image.width * 3)
    body = b"".join(
        b"".join(bytes((p.b, p.g, p.r)) for p in row) + padding
        for row in reversed(list(image.rows()))
    )
    return head + body


def _write(path: PathLike, data: bytes) -> None:
    try:
        with open(path, "wb") as stream:
            stream.write(data)
    except OSError as exc:
        raise BmpError(f"Failed to create file: {exc}") from exc


def write_bmp(path: PathLike, bmp: Bitmap) -> None:
    """Write ``bmp`` as a 24-bit BMP file, updating its header to match."""
    _prepare_header(bmp.header)
    _write(path, _encode(bmp.header, bmp.image))


def build_header(image: Image) -> Header:
    """Build a fresh header describing ``image`` as a 24-bit BMP."""
    image_size = _row_size(image.width) * image.height
    return Header(
        file_type="BM",
        file_size=BITMAP_FILE_HEADER_SIZE + BITMAP_INFO_HEADER_SIZE + image_size,
        header_size=BITMAP_FILE_HEADER_SIZE,
        dib_header_size=BITMAP_INFO_HEADER_SIZE,
        width=image.width,
        height=image.height,
        pixel_size=BITS_PER_PIXEL,
        image_size=image_size,
    )


def save_image(image: Image, path: PathLike) -> None:
    """Write ``image`` to ``path`` as a 24-bit BMP file."""
    _write(path, _encode(build_header(image), image))


def format_header(header: Header) -> str:
    """Render the header as the human-readable report used by the CLI."""
    return "\n".join([
        "BMP Header:",
        f"- File Type {header.file_type}",
        f"- FileSizeInBytes {header.file_size}",
        f"- HeaderSize {header.header_size}",
        "DIB Header:",
        f"- DibHeaderSize {header.dib_header_size}",
        f"- WidthInPixels {header.width}",
        f"- HeightInPixels {header.height}",
        f"- PixelSizeInBytes {header.pixel_size}",
        f"- ImageSizeInBytes {header.image_size}",
    ])