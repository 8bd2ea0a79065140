"""
pngppm: plain PPM (portable pixmap, P3) writer
Copyright (c) 2023 yohhoy
"""
import os


# P3 text lines, alpha channel is dropped
def ppm_lines(image):
    yield f'P3 {image.width} {image.height} 255'
    pixsz = image.pixel_size
    for y in range(image.height):
        line = image.row(y)
        yield ' '.join(f'{line[n]} {line[n+1]} {line[n+2]}' for n in range(0, len(line), pixsz))


# write image to PPM file, no partial file is left on failure
def write_ppm(image, outfile):
    text = ''.join(line + '\n' for line in ppm_lines(image))
    try:
        with open(outfile, 'w', encoding='ascii', newline='\n') as f:
            f.write(text)
    except OSError:
        if os.path.exists(outfile):
            os.remove(outfile)
        raise
