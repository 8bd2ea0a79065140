"""
pngppm: zlib stream decompression
Copyright (c) 2023 yohhoy
"""
import zlib

from .errors import DecompressCorrupt, DecompressMemory, DecompressTruncated, SizeMismatch
from .trace import TRACE


# dump ZLIB stream header (RFC1950)
def trace_zlib_header(stream):
    TRACE(f'zlib stream: length={len(stream)}')
    if len(stream) < 2:
        return
    cmf, flg = stream[0], stream[1]
    cm, cinfo = cmf & 0xf, cmf >> 4
    TRACE(f'  CM(Compression method)={cm}')
    TRACE(f'  CINFO(Compression info)={cinfo} (window size={1<<(8+cinfo)})')
    TRACE(f'  FDICT(Preset dictionary)={(flg >> 5) & 1}')
    TRACE(f'  FLEVEL(Compression level)={flg >> 6}')


# decompress into exactly expected_size bytes
def inflate(stream, expected_size):
    trace_zlib_header(stream)
    d = zlib.decompressobj()
    try:
        data = d.decompress(stream, expected_size)
        # output is full, the rest of input shall be end-of-stream only
        if d.unconsumed_tail and d.decompress(d.unconsumed_tail, 1):
            raise DecompressTruncated(f'not enough output buffer space ({expected_size} bytes)')
    except (MemoryError, OverflowError) as e:
        raise DecompressMemory(f'not enough memory ({expected_size} bytes)') from e
    except zlib.error as e:
        raise DecompressCorrupt(f'broken data: {e}') from e
    if not d.eof:
        raise DecompressTruncated(f'incomplete compressed stream ({len(stream)} bytes)')
    if len(data) != expected_size:
        raise SizeMismatch(f'decompressed {len(data)} bytes, expected {expected_size} bytes')
    return bytearray(data)
