"""
pngppm: verbose trace switch
Copyright (c) 2023 yohhoy
"""
import os

# PNGPPM_TRACE=1 prints per-chunk and per-line details
if os.environ.get('PNGPPM_TRACE', '0') not in ('', '0'):
    TRACE = print
else:
    TRACE = lambda _: None
