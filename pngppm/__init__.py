"""
pngppm: pico PNG to PPM decoder
Copyright (c) 2023 yohhoy
"""
from .decoder import Image, decode_file, decode_png, load_file
from .errors import (
    DecompressCorrupt, DecompressError, DecompressMemory, DecompressTruncated,
    InvalidFilterType, InvalidSignature, LoadError, PNGError, SizeMismatch,
    Truncated, UnsupportedImage,
)
from .ppm import write_ppm

__version__ = '0.1.0'
