"""
pngppm: command line
Copyright (c) 2023 yohhoy
"""
import os
import sys

from .decoder import decode_file
from .errors import PNGError
from .ppm import write_ppm


def main(args=None):
    args = sys.argv[1:] if args is None else args
    if not 1 <= len(args) <= 2:
        print('usage: pngppm <input.png> [<output.ppm>]', file=sys.stderr)
        return 1
    infile = args[0]
    outfile = args[1] if len(args) > 1 else os.path.splitext(infile)[0] + '.ppm'
    try:
        image = decode_file(infile)
        print(f'writing PPM output: {outfile}')
        write_ppm(image, outfile)
    except PNGError as e:
        print(f'{infile}: {e}', file=sys.stderr)
        return 1
    except OSError as e:
        print(f'{outfile}: {e}', file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
