"""
Section Reader - byte ranges of a TGA stream

A TGA file is a fixed 18-byte header, three variable-length blocks located
by offsets computed from the header, and an optional 26-byte footer at the
very end of the stream:

    [header 18][image ID][color map][pixel data] ... [footer 26]

Each block is described by a SectionConfig (length, offset, whence) and read
with read_section(). The reader position is always reset to the start of
the stream afterwards so callers never track cursor state.
"""

import io
import logging
from dataclasses import dataclass
from enum import IntEnum

from .errors import ShortReadError
from .utils.binary import IoBuffer

logger = logging.getLogger(__name__)

HEADER_LENGTH = 18
FOOTER_LENGTH = 26


class Whence(IntEnum):
    """Origin a section offset is relative to."""
    FROM_START = io.SEEK_SET
    FROM_END = io.SEEK_END


@dataclass(frozen=True)
class SectionConfig:
    """Location of a block inside the stream."""
    length: int
    offset: int
    whence: Whence = Whence.FROM_START
    name: str = "section"


HEADER_SECTION = SectionConfig(HEADER_LENGTH, 0, Whence.FROM_START, "header")
FOOTER_SECTION = SectionConfig(FOOTER_LENGTH, -FOOTER_LENGTH, Whence.FROM_END, "footer")


def new_section(length: int, offset: int, whence: Whence = Whence.FROM_START,
                name: str = "section") -> SectionConfig:
    return SectionConfig(int(length), int(offset), Whence(whence), name)


def read_section(buffer: IoBuffer, section: SectionConfig) -> bytes:
    """Read exactly section.length bytes at the section's offset.

    Raises SeekError if the offset falls before the start of the stream and
    ShortReadError if the stream ends before the section does.
    """
    try:
        buffer.seek(section.offset, int(section.whence))
        start = buffer.position
        try:
            data = buffer.read_bytes(section.length)
        except ShortReadError as e:
            raise ShortReadError(e.expected, e.actual, section.name) from None
        logger.debug(f"Read {section.name}: {section.length} bytes at {start}")
        return data
    finally:
        buffer.seek(0)
