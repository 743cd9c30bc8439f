# -*- coding: utf-8 -*-
# vim: set hls is ai et sw=4 sts=4 ts=8 nu ft=python:
'''
Format constants for the atoms needed to reach the movie duration.
'''

# atom types
MOOV = b'moov'
MVHD = b'mvhd'

# size field escapes
SIZE_TO_EOF = 0
SIZE_EXTENDED = 1

ATOM_HEADER_SIZE = 8
LARGE_ATOM_HEADER_SIZE = 16

# mvhd payload: 20 ignored bytes, then timescale and duration (u32 each)
MVHD_SKIP = 20
MVHD_FIELDS_SIZE = 8
MVHD_MIN_SIZE = MVHD_SKIP + MVHD_FIELDS_SIZE

# QuickTime default when a file stores a timescale of zero
DEFAULT_TIMESCALE = 600

# skipped atom data is discarded in chunks of at most this many bytes
SKIP_CHUNK_SIZE = 64 * 1024
