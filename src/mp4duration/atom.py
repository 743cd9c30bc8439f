# -*- coding: utf-8 -*-
# vim: set hls is ai et sw=4 sts=4 ts=8 nu ft=python:
'''
Forward-only atom scanning and movie header decoding.

Nothing here seeks: atoms that are not wanted are read and discarded, so any
object with a ``read(size)`` method will do, including network responses.
'''
import logging
import struct
from collections import namedtuple
from datetime import timedelta
from fractions import Fraction

from mp4duration.defs import *

log = logging.getLogger("mp4duration")

# payload length of an atom whose size field is 0
UNBOUNDED = None


class AtomError(Exception):
    pass


class UnexpectedEndOfStream(AtomError):
    '''The stream ended before a header, a skip or a field was complete.'''


class MalformedContainer(AtomError):
    '''A container atom has no usable extent.'''


class MalformedBox(AtomError):
    '''An atom is too small to hold what its header says it holds.'''


def read_exact(file, size):
    '''Return exactly size bytes consumed from the file's current position.

    Streams are allowed to return short reads; reading continues until the
    request is satisfied or the stream is exhausted.
    '''
    chunks = []
    remaining = size
    while remaining > 0:
        data = file.read(remaining)
        if not data:
            raise UnexpectedEndOfStream(
                "wanted %d bytes, stream ended after %d" % (size, size - remaining))
        chunks.append(data)
        remaining -= len(data)
    return b''.join(chunks)


def read64(file):
    '''Return a number by consuming 64 bits from the file's current position.
    '''
    return struct.unpack(">Q", read_exact(file, 8))[0]


def read32(file):
    '''Return a number by consuming 32 bits from the file's current position.
    '''
    return struct.unpack(">I", read_exact(file, 4))[0]


def skip(file, size):
    '''Discard size bytes from the file's current position.
    '''
    remaining = size
    while remaining > 0:
        data = file.read(min(remaining, SKIP_CHUNK_SIZE))
        if not data:
            raise UnexpectedEndOfStream(
                "stream ended with %d of %d bytes left to skip" % (remaining, size))
        remaining -= len(data)


def type_to_bytes(atom_type):
    if isinstance(atom_type, str):
        # tags such as '\xa9nam' are single bytes, not UTF-8
        atom_type = atom_type.encode('latin-1')
    if len(atom_type) != 4:
        raise ValueError("atom type must be 4 bytes, got %r" % (atom_type,))
    return atom_type


def find_next_atom(file, atom_type):
    '''Consume atoms until one of the given type is found.

    The file must be positioned at an atom header.  On return it is
    positioned at the first byte of the matching atom's payload, and the
    payload length is returned: the declared size minus the 8 or 16 header
    bytes consumed.  UNBOUNDED means the atom runs to the end of the stream.

    Raises UnexpectedEndOfStream when the stream runs out first, or when an
    atom running to the end of the stream is not the one wanted.
    '''
    atom_type = type_to_bytes(atom_type)
    while True:
        size, found = struct.unpack(">I4s", read_exact(file, ATOM_HEADER_SIZE))
        header_size = ATOM_HEADER_SIZE

        if size == SIZE_TO_EOF:
            if found == atom_type:
                log.debug("found %r, runs to end of stream", found)
                return UNBOUNDED
            raise UnexpectedEndOfStream(
                "atom %r runs to end of stream before %r" % (found, atom_type))

        if size == SIZE_EXTENDED:
            size = read64(file)
            header_size = LARGE_ATOM_HEADER_SIZE

        if size < header_size:
            raise MalformedBox("atom %r declares %d bytes, header alone is %d"
                               % (found, size, header_size))

        if found == atom_type:
            log.debug("found %r, %d byte payload", found, size - header_size)
            return size - header_size

        log.debug("skipping %r, %d bytes", found, size)
        skip(file, size - header_size)


class MovieDuration(namedtuple('MovieDuration', 'duration timescale')):
    '''Movie length: duration units at timescale units per second.'''
    __slots__ = ()

    @property
    def fraction(self):
        return Fraction(self.duration, self.timescale)

    @property
    def seconds(self):
        return self.duration / self.timescale

    @property
    def timedelta(self):
        return timedelta(seconds=self.seconds)

    def __str__(self):
        return '%.3fs' % self.seconds


def duration_from_mvhd(file, payload_length):
    '''Decode the movie duration from the mvhd payload at the file's current
    position.

    payload_length is what find_next_atom returned for the mvhd atom.  A
    known length that cannot hold the timescale and duration fields raises
    MalformedBox.
    '''
    if payload_length is not UNBOUNDED and payload_length < MVHD_MIN_SIZE:
        raise MalformedBox("mvhd payload is %d bytes, need %d"
                           % (payload_length, MVHD_MIN_SIZE))

    skip(file, MVHD_SKIP)
    timescale = read32(file)  # units per second
    duration = read32(file)
    if timescale == 0:
        timescale = DEFAULT_TIMESCALE

    log.debug("mvhd timescale=%d duration=%d", timescale, duration)
    return MovieDuration(duration, timescale)
