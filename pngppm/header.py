"""
pngppm: image header(IHDR) decoder
Copyright (c) 2023 yohhoy
"""
from collections import namedtuple
import sys

from .errors import UnsupportedImage
from .stream import ByteCursor

IHDR_FIELDS = ('width', 'height', 'bitdepth', 'color', 'compression', 'filter', 'interlace')

# PNG Specification, 12.2: four-byte unsigned integers limited to 2^31-1
PNG_UINT_MAX = 2**31 - 1

# color type bits
COLOR_PALETTE = 0b001
COLOR_TRUECOLOR = 0b010
COLOR_ALPHA = 0b100


class ImageHeader(namedtuple('ImageHeader', IHDR_FIELDS)):
    __slots__ = ()
    @property
    def is_truecolor(self):
        return bool(self.color & COLOR_TRUECOLOR)
    @property
    def has_palette(self):
        return bool(self.color & COLOR_PALETTE)
    @property
    def has_alpha(self):
        return bool(self.color & COLOR_ALPHA)
    # bytes per pixel
    @property
    def pixel_size(self):
        return (4 if self.has_alpha else 3) * (self.bitdepth // 8)
    @property
    def pixfmt(self):
        return 'RGBA' if self.has_alpha else 'RGB'
    # bytes per line, excluding filter type byte
    @property
    def stride(self):
        return self.width * self.pixel_size
    # size of decompressed IDAT stream
    @property
    def raw_size(self):
        return self.height * (self.stride + 1)


def check_IHDR(ihdr):
    if ihdr.color & ~(COLOR_PALETTE | COLOR_TRUECOLOR | COLOR_ALPHA):
        raise UnsupportedImage(f'Unknown color type {ihdr.color}')
    if not ihdr.is_truecolor or ihdr.has_palette:
        raise UnsupportedImage(f'Support Truecolour only (color type {ihdr.color})')
    if ihdr.bitdepth != 8:
        raise UnsupportedImage(f'Support 8bit only (bitdepth {ihdr.bitdepth})')
    if ihdr.compression != 0:
        raise UnsupportedImage(f'Support compression method 0 only ({ihdr.compression})')
    if ihdr.filter != 0:
        raise UnsupportedImage(f'Support filter method 0 only ({ihdr.filter})')
    if ihdr.interlace != 0:
        raise UnsupportedImage(f'Support non-interlaced only ({ihdr.interlace})')
    if ihdr.width == 0 or ihdr.height == 0:
        raise UnsupportedImage(f'Empty image {ihdr.width}x{ihdr.height}')
    if ihdr.width > PNG_UINT_MAX or ihdr.height > PNG_UINT_MAX:
        raise UnsupportedImage(f'Image size out of range {ihdr.width}x{ihdr.height}')
    if ihdr.raw_size > sys.maxsize:
        raise UnsupportedImage(f'Image too large {ihdr.width}x{ihdr.height}')


# parse image header(IHDR) chunk
def parse_IHDR(chunk):
    if chunk.type != b'IHDR' or chunk.length != 13:
        raise UnsupportedImage(f'First chunk shall be IHDR(13), found {chunk.name}({chunk.length})')
    print(f'IHDR: length={chunk.length}')
    c = ByteCursor(chunk.data)
    width = c.fetch_u32be()
    height = c.fetch_u32be()
    ihdr = ImageHeader(width, height, *c.fetch(5))
    for k in IHDR_FIELDS:
        print(f'  {k}={getattr(ihdr, k)}')
    check_IHDR(ihdr)
    return ihdr


# read first chunk as IHDR
def read_header(reader):
    return parse_IHDR(reader.next_chunk())
