import io
import struct


def atom(atom_type, payload=b'', size=None):
    if size is None:
        size = 8 + len(payload)
    return struct.pack(">I", size) + atom_type + payload


def large_atom(atom_type, payload=b''):
    # size field 1, then the 64-bit total including the 16 header bytes
    return struct.pack(">I", 1) + atom_type + struct.pack(">Q", 16 + len(payload)) + payload


def mvhd_payload(timescale, duration, trailing=4):
    # 20 ignored bytes, timescale, duration, then whatever follows
    return b'\x00' * 20 + struct.pack(">II", timescale, duration) + b'\x00' * trailing


class TrickleReader:
    """Forward-only stream that hands out at most one byte per read."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        return self._data.read(min(size, 1) if size >= 0 else 1)

    def remaining(self):
        return self._data.read()


class RecordingReader:
    """Forward-only stream that remembers the largest read requested."""

    def __init__(self, data):
        self._data = io.BytesIO(data)
        self.largest_read = 0

    def read(self, size=-1):
        self.largest_read = max(self.largest_read, size)
        return self._data.read(size)


class FailingReader:
    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        data = self._data.read(size)
        if not data:
            raise OSError("connection reset")
        return data
