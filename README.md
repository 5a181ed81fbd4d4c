# bmpkit

A small command-line tool and library for uncompressed 24-bit BMP images. It
prints header information and applies crops, mirrors, rotations and colour
filters.

## Install

    pip install .

This installs the `bitmap` command.

## Command line

Running `bitmap` with no command, or with an unknown one, prints the general
usage message and exits with status 1.

### header

Print a file's header:

    bitmap header image.bmp

The report lists the file type, file size, header size, DIB header size,
width, height, bits per pixel and image size. Exactly one file must be given.

### apply

Apply transformations and write the result to a new file:

    bitmap apply --crop=10-10-100-80 --mirror=horizontal --rotate=right --filter=grayscale in.bmp out.bmp

Options may be written as `--name=value`, `--name value`, `-name=value` or
`-name value`, and each may be given more than once. Options must come before
the two file names; `--` ends the options. A flag written with three leading
dashes, such as `---filter=blur`, is read as if it had two. At least one
transformation is required, the source file must exist and the output
directory, if one is named, must exist.

Whatever the order on the command line, the kinds of transformation run in
this order, each kind in the order given:

1. `--crop`: `OffsetX-OffsetY` (up to the right and bottom edges) or
   `OffsetX-OffsetY-Width-Height`. The area must lie inside the image.
2. `--mirror`: `horizontal` (`h`, `hor`, `horizontally`) or `vertical`
   (`v`, `ver`, `vertically`), in any letter case.
3. `--rotate`: clockwise for `right`, `90`, `270`; `left`, `-90`, `-270`
   turn the other way; `180` and `-180` turn half round.
4. `--filter`: `blue`, `red`, `green` (keep one channel), `grayscale`,
   `negative`, `pixelate` (20-pixel blocks) and `blur` (21×21 box blur).
   Unknown filter names are ignored.

Errors are written to standard error and the command exits with status 1.

Only 24-bit uncompressed BMP files can be read. The output is always a 24-bit
BMP.

## Library

```python
from bmpkit.image import read_bmp, write_bmp
from bmpkit.rotate import apply_rotations
from bmpkit.filters import apply_filters

bmp = read_bmp("in.bmp")
bmp.image = apply_rotations(bmp.image, ["right"])
bmp.header.width = bmp.image.width
bmp.header.height = bmp.image.height
apply_filters(bmp.image, ["negative"])
write_bmp("out.bmp", bmp)
```

`write_bmp` requires the header's width and height to match the image. To
write an image with a freshly built header, use
`bmpkit.image.save_image(image, path)`.

The modules:

- `bmpkit.image`: `Pixel`, `Image`, `Header`, `Bitmap`, `read_header`,
  `read_image`, `read_bmp`, `write_bmp`, `build_header`, `save_image` and
  `format_header`.
- `bmpkit.crop`: `CropParams`, `parse_crop_params`, `crop_image`,
  `apply_crops`.
- `bmpkit.mirror`: `normalize_mirror_flag`, `mirror_horizontal`,
  `mirror_vertical`, `apply_mirrors` (all in place).
- `bmpkit.rotate`: `is_valid_rotation`, `normalize_rotation`, `rotate_image`,
  `apply_rotations` (return new images).
- `bmpkit.filters`: `apply_filters` and one `apply_*_filter` function per
  filter, all in place; `apply_pixelate_filter` and `apply_blur_filter` take
  the block or kernel size.
- `bmpkit.apply`: `handle_apply_command(args)` and `normalize_flags`.
- `bmpkit.cli`: `main(argv=None)` and `handle_header_command(args)`, both
  returning the exit status.

Errors are raised as exceptions: `BmpError` when a file cannot be read or
written, `CropError`, `MirrorError` and `RotationError` (all `ValueError`s)
for bad transformation arguments, `ValueError` for a negative pixelate block
or blur kernel size, and `ApplyError` for problems with the `apply` command.

## Tests

    pip install .[test]
    pytest