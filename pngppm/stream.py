"""
pngppm: PNG chunk stream reader
Copyright (c) 2023 yohhoy
"""
from collections import namedtuple

from .errors import InvalidSignature, Truncated
from .trace import TRACE

PNG_SIGNATURE = b'\x89PNG\x0d\x0a\x1a\x0a'


# byte reader
class ByteCursor():
    def __init__(self, data, pos=0):
        self.data = memoryview(data)
        self.pos = pos
    # read n-bytes (view into buffer, not a copy)
    def fetch(self, n):
        if n < 0 or self.pos + n > len(self.data):
            raise Truncated(f'need {n} bytes at offset {self.pos}, {self.remaining()} bytes left')
        view = self.data[self.pos:self.pos + n]
        self.pos += n
        return view
    # read 32bit unsigned integer (big endian)
    def fetch_u32be(self):
        b = self.fetch(4)
        return (b[0] << 24) | (b[1] << 16) | (b[2] << 8) | b[3]
    def remaining(self):
        return len(self.data) - self.pos
    def at_end(self):
        return self.pos == len(self.data)
    def copy(self):
        return ByteCursor(self.data, self.pos)
assert ByteCursor(b'\x00\x01\x02\x03').fetch_u32be() == 0x010203


class Chunk(namedtuple('Chunk', ('length', 'type', 'data', 'crc'))):
    __slots__ = ()
    # ancillary bit is bit5 of the first type byte
    @property
    def is_critical(self):
        return not (self.type[0] & 0x20)
    @property
    def name(self):
        return self.type.decode('latin-1')


# PNG chunk reader
class ChunkReader():
    def __init__(self, data):
        self.cursor = ByteCursor(data)
    # check PNG signature (first 8 bytes)
    def check_signature(self):
        c = self.cursor.copy()
        try:
            signature = bytes(c.fetch(len(PNG_SIGNATURE)))
        except Truncated as e:
            raise InvalidSignature(f'Invalid PNG signature: {e}') from None
        if signature != PNG_SIGNATURE:
            raise InvalidSignature(f'Invalid PNG signature: {signature!r}')
        self.cursor.pos = c.pos
    # read length(4)+type(4)+data(length)+crc(4), CRC is not verified
    def next_chunk(self):
        c = self.cursor.copy()
        length = c.fetch_u32be()
        ctype = bytes(c.fetch(4))
        data = c.fetch(length)
        crc = c.fetch_u32be()
        self.cursor.pos = c.pos
        return Chunk(length, ctype, data, crc)
    # iterate remaining chunks up to end of buffer
    def chunks(self):
        while not self.cursor.at_end():
            yield self.next_chunk()
    # independent reader from the first chunk
    def replay(self):
        reader = ChunkReader(self.cursor.data)
        reader.cursor.pos = len(PNG_SIGNATURE)
        return reader


# gather all IDAT chunks in file order
def gather_idat(reader):
    r = reader.replay()
    idat = bytearray()
    count = 0
    try:
        for chunk in r.chunks():
            kind = 'critical' if chunk.is_critical else 'ancillary'
            TRACE(f'{chunk.name}: length={chunk.length} ({kind}) crc=0x{chunk.crc:08x}')
            if chunk.type == b'IDAT':
                idat += chunk.data
                count += 1
    except Truncated as e:
        # trailing garbage ends the chunk stream
        TRACE(f'  end of chunk stream: {e}')
    print(f'IDAT: {count} chunks, length={len(idat)}')
    return idat
