"""
targa - Byte Source Adapter Tests

Covers IoBuffer: construction from bytes/streams/paths, little-endian field
readers, exact-length reads and seek validation.

Can be run standalone: python test_binary.py
Or via main runner: python tests.py
"""

import io
import os
import sys
import tempfile

import tga_fixtures  # noqa: F401  (path setup)

from targa.errors import SeekError, ShortReadError, TGAIOError
from targa.utils.binary import IoBuffer, ByteOrder


class _FailingStream:
    def read(self, *args):
        raise OSError("device not ready")


class _TextStream:
    def read(self, *args):
        return "not bytes"


def test_little_endian_readers():
    buf = IoBuffer.from_bytes(bytes([0x7F, 0x34, 0x12, 0x78, 0x56, 0x34, 0x12, 0xFF, 0xFF]))
    assert buf.read_uint8() == 0x7F
    assert buf.read_uint16() == 0x1234
    assert buf.read_uint32() == 0x12345678
    assert buf.read_int16() == -1
    assert not buf.has_bytes(1)


def test_big_endian_reader():
    buf = IoBuffer.from_bytes(b"\x12\x34", ByteOrder.BIG_ENDIAN)
    assert buf.read_uint16() == 0x1234


def test_read_bytes_is_exact():
    buf = IoBuffer.from_bytes(b"abc")
    assert buf.read_bytes(2) == b"ab"
    try:
        buf.read_bytes(5)
    except ShortReadError as e:
        assert e.expected == 5
        assert e.actual == 1
    else:
        raise AssertionError("read past the end did not raise")


def test_field_read_past_end_raises():
    buf = IoBuffer.from_bytes(b"\x01")
    try:
        buf.read_uint32()
    except ShortReadError:
        pass
    else:
        raise AssertionError("expected ShortReadError")


def test_seek_before_start_raises():
    buf = IoBuffer.from_bytes(bytes(10))
    for offset, whence in ((-1, io.SEEK_SET), (-11, io.SEEK_END)):
        try:
            buf.seek(offset, whence)
        except SeekError as e:
            assert e.position < 0
        else:
            raise AssertionError(f"seek({offset}, {whence}) did not raise")


def test_seek_and_size():
    buf = IoBuffer.from_bytes(bytes(range(10)))
    assert buf.size == 10
    buf.seek(-3, io.SEEK_END)
    assert buf.position == 7
    assert buf.remaining == 3
    assert buf.read_byte() == 7
    buf.skip(1)
    assert buf.read_byte() == 9
    buf.position = 0
    assert buf.read_byte() == 0


def test_from_stream_reads_everything_once():
    stream = io.BytesIO(b"\x00" * 5 + b"tail")
    stream.seek(2)
    buf = IoBuffer.from_stream(stream)
    assert buf.size == 7
    assert stream.read() == b""


def test_from_source_variants():
    data = b"targa"
    assert IoBuffer.from_source(data).read_bytes(5) == data
    assert IoBuffer.from_source(bytearray(data)).read_bytes(5) == data
    assert IoBuffer.from_source(io.BytesIO(data)).read_bytes(5) == data

    existing = IoBuffer.from_bytes(data)
    assert IoBuffer.from_source(existing) is existing

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "data.bin")
        with open(path, "wb") as f:
            f.write(data)
        assert IoBuffer.from_source(path).read_bytes(5) == data


def test_io_failures_are_wrapped():
    try:
        IoBuffer.from_source(_FailingStream())
    except TGAIOError as e:
        assert isinstance(e.__cause__, OSError)
    else:
        raise AssertionError("expected TGAIOError")

    try:
        IoBuffer.from_file(os.path.join(tempfile.gettempdir(), "no-such-dir", "missing.tga"))
    except TGAIOError:
        pass
    else:
        raise AssertionError("expected TGAIOError for a missing file")


def test_rejects_non_binary_sources():
    for source in (_TextStream(), 42):
        try:
            IoBuffer.from_source(source)
        except TypeError:
            pass
        else:
            raise AssertionError(f"{source!r} was accepted")


if __name__ == "__main__":
    from tests import run_module
    sys.exit(run_module(sys.modules[__name__]))
