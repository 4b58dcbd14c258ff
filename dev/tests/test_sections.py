"""
targa - Section Reader Tests

Can be run standalone: python test_sections.py
Or via main runner: python tests.py
"""

import sys

from tga_fixtures import build_footer, build_header, build_tga

from targa.errors import SeekError, ShortReadError
from targa.sections import (
    FOOTER_SECTION, HEADER_SECTION, Whence, new_section, read_section,
)
from targa.utils.binary import IoBuffer


def test_predefined_sections():
    assert (HEADER_SECTION.length, HEADER_SECTION.offset, HEADER_SECTION.whence) == (18, 0, Whence.FROM_START)
    assert (FOOTER_SECTION.length, FOOTER_SECTION.offset, FOOTER_SECTION.whence) == (26, -26, Whence.FROM_END)


def test_reads_header_and_footer_ranges():
    header = build_header(width=3, height=2, bits_per_pixel=24)
    footer = build_footer()
    buf = IoBuffer.from_bytes(build_tga(bytes(18), width=3, height=2, bits_per_pixel=24))

    assert read_section(buf, HEADER_SECTION) == header
    assert read_section(buf, FOOTER_SECTION) == footer


def test_position_reset_after_every_read():
    buf = IoBuffer.from_bytes(bytes(range(40)))
    read_section(buf, new_section(4, 10))
    assert buf.position == 0
    read_section(buf, FOOTER_SECTION)
    assert buf.position == 0


def test_position_reset_after_failure():
    buf = IoBuffer.from_bytes(bytes(30))
    try:
        read_section(buf, new_section(10, 25))
    except ShortReadError:
        pass
    assert buf.position == 0


def test_short_read_names_the_section():
    buf = IoBuffer.from_bytes(bytes(30))
    try:
        read_section(buf, new_section(10, 25, name="image data"))
    except ShortReadError as e:
        assert e.expected == 10
        assert e.actual == 5
        assert "image data" in str(e)
    else:
        raise AssertionError("expected ShortReadError")


def test_footer_of_tiny_stream_is_a_seek_error():
    buf = IoBuffer.from_bytes(bytes(20))
    try:
        read_section(buf, FOOTER_SECTION)
    except SeekError as e:
        assert e.position == -6
    else:
        raise AssertionError("expected SeekError")


def test_zero_length_section():
    buf = IoBuffer.from_bytes(bytes(18))
    assert read_section(buf, new_section(0, 18)) == b""


if __name__ == "__main__":
    from tests import run_module
    sys.exit(run_module(sys.modules[__name__]))
