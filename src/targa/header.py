"""
TGA Header - the fixed 18-byte structure at the start of every file

Layout (little-endian):
    0   ID length               (1 byte)
    1   Color map type          (1 byte)  0 = none, 1 = present
    2   Image type              (1 byte)
    3   Color map origin        (2 bytes)
    5   Color map length        (2 bytes)
    7   Color map depth         (1 byte)  bits per color map entry
    8   X origin                (2 bytes)
    10  Y origin                (2 bytes)
    12  Width                   (2 bytes)
    14  Height                  (2 bytes)
    16  Bits per pixel          (1 byte)
    17  Image descriptor        (1 byte)  bits 0-3 alpha, bits 4-5 origin
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .errors import MalformedStructureError
from .sections import HEADER_LENGTH
from .utils.binary import IoBuffer, ByteOrder


class ImageType(IntEnum):
    """Image type codes stored in header byte 2."""
    NO_IMAGE = 0
    COLOR_MAPPED = 1
    TRUE_COLOR = 2
    GRAYSCALE = 3
    RLE_COLOR_MAPPED = 9
    RLE_TRUE_COLOR = 10
    RLE_GRAYSCALE = 11


class TargaSize(IntEnum):
    """Pixel depths used by true-color targa files."""
    TARGA_16 = 16
    TARGA_24 = 24
    TARGA_32 = 32


class ImageOrigin(IntEnum):
    """Corner of the image that the first stored pixel belongs to."""
    BOTTOM_LEFT = 0
    BOTTOM_RIGHT = 1
    TOP_LEFT = 2
    TOP_RIGHT = 3

    @classmethod
    def from_descriptor(cls, descriptor: int) -> 'ImageOrigin':
        """Decode bits 4 (right) and 5 (top) of the image descriptor."""
        if descriptor & 48 == 48:
            return cls.TOP_RIGHT
        if descriptor & 32 == 32:
            return cls.TOP_LEFT
        if descriptor & 16 == 16:
            return cls.BOTTOM_RIGHT
        return cls.BOTTOM_LEFT

    @property
    def label(self) -> str:
        return ''.join(part.capitalize() for part in self.name.split('_'))


@dataclass(frozen=True)
class Header:
    """Decoded TGA header."""
    id_length: int = 0
    color_map_type: int = 0
    image_type: int = ImageType.NO_IMAGE
    color_map_origin: int = 0
    color_map_length: int = 0
    color_map_depth: int = 0
    x_origin: int = 0
    y_origin: int = 0
    width: int = 0
    height: int = 0
    bits_per_pixel: int = 0
    image_descriptor: int = 0

    SIZE = HEADER_LENGTH

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Header':
        """Decode a header from the first 18 bytes of data."""
        if len(data) < cls.SIZE:
            raise MalformedStructureError("Header", cls.SIZE, len(data))

        io = IoBuffer.from_bytes(data[:cls.SIZE], ByteOrder.LITTLE_ENDIAN)
        return cls(
            id_length=io.read_uint8(),
            color_map_type=io.read_uint8(),
            image_type=io.read_uint8(),
            color_map_origin=io.read_uint16(),
            color_map_length=io.read_uint16(),
            color_map_depth=io.read_uint8(),
            x_origin=io.read_uint16(),
            y_origin=io.read_uint16(),
            width=io.read_uint16(),
            height=io.read_uint16(),
            bits_per_pixel=io.read_uint8(),
            image_descriptor=io.read_uint8(),
        )

    @property
    def image_kind(self) -> Optional[ImageType]:
        """The image type as an enum member, or None for unknown codes."""
        try:
            return ImageType(self.image_type)
        except ValueError:
            return None

    @property
    def has_image_id_field(self) -> bool:
        return self.id_length > 0

    @property
    def has_color_map(self) -> bool:
        return self.color_map_type == 1

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def image_bytes(self) -> int:
        """Size of the pixel data block."""
        return self.width * self.height * self.bytes_per_pixel

    @property
    def color_map_bytes(self) -> int:
        """Size of the color map block (entries are padded to whole bytes)."""
        if not self.has_color_map:
            return 0
        return self.color_map_length * ((self.color_map_depth + 7) // 8)

    @property
    def alpha_bits(self) -> int:
        return self.image_descriptor & 0x0F

    @property
    def image_origin(self) -> ImageOrigin:
        return ImageOrigin.from_descriptor(self.image_descriptor)

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        """Bounding rectangle as (left, top, right, bottom)."""
        return (0, 0, self.width, self.height)

    @property
    def image_id_offset(self) -> int:
        return self.SIZE

    @property
    def color_map_offset(self) -> int:
        return self.SIZE + self.id_length

    @property
    def image_data_offset(self) -> int:
        return self.SIZE + self.id_length + self.color_map_bytes

    def summary(self) -> str:
        kind = self.image_kind.name if self.image_kind is not None else "UNKNOWN"
        return (f"TGA {self.width}x{self.height} {self.bits_per_pixel}bpp "
                f"type={self.image_type} ({kind}) origin={self.image_origin.label}")
