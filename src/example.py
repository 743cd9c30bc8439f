#!/usr/bin/env python
'''
Print the duration of MP4/QuickTime files.

usage: example.py [-v] FILE...
'''

import logging
import sys

from mp4duration import AtomError, file_duration

def print_duration(filename):
    d = file_duration(filename)
    print("%s: %s (%d/%d)" % (filename, d, d.duration, d.timescale))

def main(argv):
    args = argv[1:]
    level = logging.WARNING
    if args and args[0] == '-v':
        level = logging.DEBUG
        args = args[1:]
    logging.basicConfig(level=level)

    if not args:
        print("too few arguments.")
        return 1

    status = 0
    for filename in args:
        try:
            print_duration(filename)
        except (AtomError, OSError) as e:
            print("%s: error: %s" % (filename, e))
            status = 1
    return status

if __name__ == '__main__':
    sys.exit(main(sys.argv))
