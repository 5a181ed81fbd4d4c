"""Read, inspect and transform 24-bit BMP images: crop, mirror, rotate and filter."""

__version__ = "0.1.0"