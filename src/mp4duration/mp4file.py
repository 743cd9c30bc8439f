# -*- coding: utf-8 -*-
# vim: set hls is ai et sw=4 sts=4 ts=8 nu ft=python:

# built-in modules
import logging

# local modules
from mp4duration.atom import (MalformedContainer, UNBOUNDED,
                              duration_from_mvhd, find_next_atom)
from mp4duration.defs import MOOV, MVHD


log = logging.getLogger("mp4duration")


def duration(file):
    '''Return the MovieDuration of the MP4/QuickTime stream in file.

    The stream is read forward from its current position, which must be the
    start of the top-level atom sequence.  It is left open.
    '''
    moov_length = find_next_atom(file, MOOV)
    if moov_length is UNBOUNDED:
        raise MalformedContainer("moov atom has no declared size")

    # the first child of moov starts right after its header
    mvhd_length = find_next_atom(file, MVHD)
    return duration_from_mvhd(file, mvhd_length)


def file_duration(filename):
    log.debug("reading %s", filename)
    with open(filename, "rb") as file:
        return duration(file)
