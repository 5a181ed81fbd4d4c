import struct

import pytest

from bmpkit.image import (
    Bitmap,
    BmpError,
    Header,
    Image,
    Pixel,
    build_header,
    format_header,
    read_bmp,
    read_header,
    read_image,
    save_image,
    write_bmp,
)


def _sample_image(width=3, height=2):
    pixels = [
        Pixel(b=(x * 10) % 256, g=(y * 20) % 256, r=(x + y) % 256)
        for y in range(height)
        for x in range(width)
    ]
    return Image(width, height, pixels)


def _raw_header(width, height, bits=24, dib=40):
    return struct.pack(
        "<2sIIIIiiHHIIiiII",
        b"BM", 0, 0, 14 + dib, dib, width, height, 1, bits, 0, 0, 0, 0, 0, 0,
    )


def test_image_default_pixels_are_black():
    image = Image(2, 1)
    assert image.pixels == [Pixel(0, 0, 0), Pixel(0, 0, 0)]


def test_image_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Image(2, 2, [Pixel()] * 3)


def test_image_rows_top_to_bottom():
    image = _sample_image(3, 2)
    rows = list(image.rows())
    assert rows == [image.pixels[:3], image.pixels[3:]]


def test_save_and_read_round_trip(tmp_path):
    path = tmp_path / "out.bmp"
    image = _sample_image(3, 2)
    save_image(image, path)
    bmp = read_bmp(path)
    assert bmp.image == image
    assert bmp.header.width == 3
    assert bmp.header.height == 2


def test_write_bmp_round_trip_and_header_update(tmp_path):
    path = tmp_path / "out.bmp"
    image = _sample_image(5, 3)
    bmp = Bitmap(header=Header(width=5, height=3), image=image)
    write_bmp(path, bmp)
    assert bmp.header.file_type == "BM"
    assert bmp.header.header_size == 14
    assert bmp.header.dib_header_size == 40
    assert bmp.header.file_size == path.stat().st_size
    assert read_bmp(path).image == image


def test_written_file_layout(tmp_path):
    path = tmp_path / "out.bmp"
    image = Image(1, 2, [Pixel(b=1, g=2, r=3), Pixel(b=4, g=5, r=6)])
    save_image(image, path)
    data = path.read_bytes()
    assert data[:2] == b"BM"
    (offset,) = struct.unpack_from("<I", data, 10)
    assert offset == 54
    (planes, bits) = struct.unpack_from("<HH", data, 26)
    assert (planes, bits) == (1, 24)
    # Bottom row comes first, in B, G, R order.
    assert data[offset:offset + 3] == bytes([4, 5, 6])


def test_rows_are_padded_to_four_bytes(tmp_path):
    path = tmp_path / "out.bmp"
    save_image(_sample_image(1, 3), path)
    header = read_header(path)
    assert header.image_size % 4 == 0
    assert header.image_size == path.stat().st_size - 54


def test_build_header_matches_written_file(tmp_path):
    image = _sample_image(7, 4)
    header = build_header(image)
    path = tmp_path / "out.bmp"
    save_image(image, path)
    assert header.file_size == path.stat().st_size
    assert header.file_size == header.header_size + header.dib_header_size + header.image_size
    assert read_header(path) == header


def test_read_image_with_padding(tmp_path):
    path = tmp_path / "manual.bmp"
    rows = bytes([1, 2, 3, 0]) + bytes([7, 8, 9, 0])  # bottom row, then top row
    path.write_bytes(_raw_header(1, 2) + rows)
    image = read_image(path, read_header(path))
    assert image.pixels == [Pixel(7, 8, 9), Pixel(1, 2, 3)]


def test_read_header_rejects_non_bmp(tmp_path):
    path = tmp_path / "bad.bmp"
    path.write_bytes(b"PK" + bytes(60))
    with pytest.raises(BmpError):
        read_header(path)


def test_read_header_rejects_other_bit_depths(tmp_path):
    path = tmp_path / "deep.bmp"
    path.write_bytes(_raw_header(1, 1, bits=32) + bytes(4))
    with pytest.raises(BmpError, match="24 bit"):
        read_header(path)


def test_read_header_missing_file(tmp_path):
    with pytest.raises(BmpError):
        read_header(tmp_path / "missing.bmp")


def test_read_header_truncated(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(b"BM" + bytes(5))
    with pytest.raises(BmpError):
        read_header(path)


def test_read_image_truncated_pixels(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(_raw_header(2, 2) + bytes(8))
    with pytest.raises(BmpError):
        read_bmp(path)


def test_write_bmp_rejects_mismatched_header(tmp_path):
    bmp = Bitmap(header=Header(width=4, height=4), image=_sample_image(2, 2))
    with pytest.raises(BmpError):
        write_bmp(tmp_path / "out.bmp", bmp)


def test_format_header(tmp_path):
    path = tmp_path / "out.bmp"
    save_image(_sample_image(3, 2), path)
    lines = format_header(read_header(path)).splitlines()
    assert lines[0] == "BMP Header:"
    assert "- File Type BM" in lines
    assert "- HeaderSize 14" in lines
    assert "DIB Header:" in lines
    assert "- DibHeaderSize 40" in lines
    assert "- WidthInPixels 3" in lines
    assert "- HeightInPixels 2" in lines
    assert "- PixelSizeInBytes 24" in lines