"""
pngppm: decode errors
Copyright (c) 2023 yohhoy
"""


class PNGError(Exception):
    pass


# input file could not be read
class LoadError(PNGError):
    pass


class InvalidSignature(PNGError):
    pass


# field or chunk extends past the end of buffer
class Truncated(PNGError):
    pass


# non-truecolor, palette, bitdepth!=8 or non-zero compression/filter/interlace method
class UnsupportedImage(PNGError):
    pass


class DecompressError(PNGError):
    pass


class DecompressMemory(DecompressError):
    pass


# insufficient compressed input or output capacity
class DecompressTruncated(DecompressError):
    pass


class DecompressCorrupt(DecompressError):
    pass


# decompressed size differs from height * (width * pixsz + 1)
class SizeMismatch(DecompressError):
    pass


class InvalidFilterType(PNGError):
    pass
