"""
TGA Footer - the 26-byte trailer of TGA 2.0 ("new") files

    0   Extension area offset       (4 bytes)
    4   Developer directory offset  (4 bytes)
    8   Signature "TRUEVISION-XFILE" (16 bytes)
    24  "."                         (1 byte)
    25  0x00                        (1 byte)

Original TGA files have no footer; their last 26 bytes still decode into a
Footer, the signature just won't match.
"""

from dataclasses import dataclass
from enum import IntEnum

from .errors import MalformedStructureError
from .sections import FOOTER_LENGTH
from .utils.binary import IoBuffer, ByteOrder

SIGNATURE = b"TRUEVISION-XFILE"


class Version(IntEnum):
    ORIGINAL = 0
    NEW = 1

    @property
    def label(self) -> str:
        return "OriginalTGA" if self is Version.ORIGINAL else "NewTGA"


@dataclass(frozen=True)
class Footer:
    extension_area_offset: int = 0
    developer_directory_offset: int = 0
    signature: bytes = bytes(16)
    point: int = 0
    end: int = 0

    SIZE = FOOTER_LENGTH

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Footer':
        """Decode a footer from the first 26 bytes of data."""
        if len(data) < cls.SIZE:
            raise MalformedStructureError("Footer", cls.SIZE, len(data))

        io = IoBuffer.from_bytes(data[:cls.SIZE], ByteOrder.LITTLE_ENDIAN)
        return cls(
            extension_area_offset=io.read_uint32(),
            developer_directory_offset=io.read_uint32(),
            signature=io.read_bytes(16),
            point=io.read_uint8(),
            end=io.read_uint8(),
        )

    @property
    def version(self) -> Version:
        if self.signature == SIGNATURE:
            return Version.NEW
        return Version.ORIGINAL
