"""
pngppm: PNG decode pipeline
Copyright (c) 2023 yohhoy
"""
from collections import namedtuple

from .errors import LoadError
from .filters import reconstruct_image
from .header import read_header
from .inflate import inflate
from .stream import ChunkReader, gather_idat


# reconstructed pixels, each line still prefixed by its filter type byte
class Image(namedtuple('Image', ('width', 'height', 'pixel_size', 'data'))):
    __slots__ = ()
    @property
    def stride(self):
        return self.width * self.pixel_size
    # pixel bytes of line y
    def row(self, y):
        pos = y * (self.stride + 1) + 1
        return self.data[pos:pos + self.stride]


# read whole file into memory
def load_file(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise LoadError(f'failed to open file: {e}') from e


# decode PNG byte stream
def decode_png(data):
    reader = ChunkReader(data)
    reader.check_signature()
    print(f'Signature: {bytes(reader.cursor.data[:8])}')
    ihdr = read_header(reader)
    stream = gather_idat(reader)
    raw = inflate(stream, ihdr.raw_size)
    del stream
    print(f'decompressed IDAT chunks, size {len(raw)}')
    reconstruct_image(ihdr, raw)
    return Image(ihdr.width, ihdr.height, ihdr.pixel_size, raw)


def decode_file(path):
    return decode_png(load_file(path))
