[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpkit"
version = "0.1.0"
description = "Inspect and transform 24-bit BMP images: crop, mirror, rotate and filter"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "image", "crop", "rotate", "mirror", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitmap = "bmpkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
