"""
pngppm: scanline reconstruction (PNG Specification, 9. Filtering)
Copyright (c) 2023 yohhoy
"""
from enum import IntEnum

from .errors import InvalidFilterType, SizeMismatch
from .trace import TRACE


class FilterType(IntEnum):
    NONE = 0
    SUB = 1
    UP = 2
    AVERAGE = 3
    PAETH = 4


# Paeth predictor (PNG Specification, 9.4)
def paeth_predictor(a, b, c):
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c
assert paeth_predictor(0, 0, 0) == 0
assert paeth_predictor(10, 20, 15) == 15


# Each unfilter_* rewrites one line in place.
#   line: offset of the first pixel byte in data
#   prev: offset of the first pixel byte of the line above, None for the top line
# Left/above neighbors are already reconstructed when they are read.

def unfilter_none(data, line, prev, stride, pixsz):
    pass


def unfilter_sub(data, line, prev, stride, pixsz):
    for x in range(line + pixsz, line + stride):
        data[x] = (data[x] + data[x - pixsz]) & 0xff


def unfilter_up(data, line, prev, stride, pixsz):
    if prev is None:
        return
    for x in range(stride):
        data[line + x] = (data[line + x] + data[prev + x]) & 0xff


def unfilter_average(data, line, prev, stride, pixsz):
    for x in range(stride):
        a = data[line + x - pixsz] if x >= pixsz else 0
        b = data[prev + x] if prev is not None else 0
        data[line + x] = (data[line + x] + (a + b) // 2) & 0xff


def unfilter_paeth(data, line, prev, stride, pixsz):
    for x in range(stride):
        a = data[line + x - pixsz] if x >= pixsz else 0
        if prev is None:
            b = c = 0
        else:
            b = data[prev + x]
            c = data[prev + x - pixsz] if x >= pixsz else 0
        data[line + x] = (data[line + x] + paeth_predictor(a, b, c)) & 0xff


UNFILTERS = {
    FilterType.NONE: unfilter_none,
    FilterType.SUB: unfilter_sub,
    FilterType.UP: unfilter_up,
    FilterType.AVERAGE: unfilter_average,
    FilterType.PAETH: unfilter_paeth,
}


# reconstruct image in place, top to bottom
def reconstruct_image(ihdr, data):
    width, height = ihdr.width, ihdr.height
    pixsz, stride = ihdr.pixel_size, ihdr.stride
    print(f'image: {width}x{height}, {ihdr.pixfmt}')
    if len(data) != ihdr.raw_size:
        raise SizeMismatch(f'Incorrect data size {len(data)}, expected {ihdr.raw_size}')
    pos, prev = 0, None
    for y in range(height):
        try:
            ftype = FilterType(data[pos])
        except ValueError:
            raise InvalidFilterType(f'line#{y}: invalid filter type {data[pos]}') from None
        TRACE(f'  line#{y}: filter={ftype.name.lower()}')
        UNFILTERS[ftype](data, pos + 1, prev, stride, pixsz)
        prev = pos + 1
        pos += 1 + stride
    return data
