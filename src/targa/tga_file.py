"""
TGA File - structural view of a targa stream

read() parses the footer, the header and the raw image ID, color map and
pixel data blocks without converting any pixels. Conversion into an RGBA
raster lives in decoder.py.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from .footer import Footer, Version
from .header import Header
from .sections import HEADER_SECTION, FOOTER_SECTION, new_section, read_section
from .utils.binary import IoBuffer, Source

if TYPE_CHECKING:
    from PIL import Image as PILImage
    from .decoder import DecoderConfig

logger = logging.getLogger(__name__)


def pixel_at(data: bytes, width: int, height: int, bytes_per_pixel: int,
             x: int, y: int) -> Optional[bytes]:
    """
    Raw bytes of the pixel at source coordinate (x, y).

    Coordinates address the row-major layout as stored on disk, not the
    displayed image. Returns None when (x, y) lies outside the raster.
    """
    if x < 0 or y < 0 or x >= width or y >= height:
        return None

    # row * width + column
    begin = y * width * bytes_per_pixel + x * bytes_per_pixel
    return bytes(data[begin:begin + bytes_per_pixel])


@dataclass(frozen=True)
class Image:
    """The three variable-length blocks following the header."""
    id: bytes = b""
    color_map: bytes = b""
    data: bytes = b""


@dataclass(frozen=True)
class TGAFile:
    header: Header = field(default_factory=Header)
    image: Image = field(default_factory=Image)
    footer: Footer = field(default_factory=Footer)

    @property
    def version(self) -> Version:
        return self.footer.version

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    def pixel_at(self, x: int, y: int) -> Optional[bytes]:
        """Raw bytes of the stored pixel at source coordinate (x, y)."""
        return pixel_at(self.image.data, self.header.width, self.header.height,
                        self.header.bytes_per_pixel, x, y)

    def pixels(self) -> Iterator[bytes]:
        """Yield every raw pixel in storage order."""
        step = self.header.bytes_per_pixel
        if step <= 0:
            return
        data = self.image.data
        for i in range(0, self.header.image_bytes, step):
            yield bytes(data[i:i + step])

    def to_image(self, config: Optional['DecoderConfig'] = None) -> 'PILImage.Image':
        """Assemble the pixel data into a top-down RGBA image."""
        from .decoder import assemble
        return assemble(self.header, self.image.data, config)

    def summary(self) -> str:
        return (f"{self.header.summary()}\n"
                f"Version: {self.version.label}\n"
                f"Image ID: {len(self.image.id)} bytes, "
                f"color map: {len(self.image.color_map)} bytes, "
                f"pixel data: {len(self.image.data)} bytes")


def read_buffer(buffer: IoBuffer,
                validate: Optional[Callable[[Header], None]] = None) -> TGAFile:
    """
    Parse every section of an already buffered TGA stream.

    validate, when given, is called with the header before any payload
    section is read and may raise to abort.
    """
    footer = Footer.from_bytes(read_section(buffer, FOOTER_SECTION))
    header = Header.from_bytes(read_section(buffer, HEADER_SECTION))
    logger.debug(f"{header.summary()}, footer version {footer.version.label}")
    if validate is not None:
        validate(header)

    image_id = read_section(buffer, new_section(
        header.id_length, header.image_id_offset, name="image ID"))
    color_map = read_section(buffer, new_section(
        header.color_map_bytes, header.color_map_offset, name="color map"))
    data = read_section(buffer, new_section(
        header.image_bytes, header.image_data_offset, name="image data"))

    return TGAFile(
        header=header,
        image=Image(id=image_id, color_map=color_map, data=data),
        footer=footer,
    )


def read(source: Source) -> TGAFile:
    """
    Read a TGA file without converting its pixels.

    Args:
        source: bytes, a file path, or a readable binary stream. Streams
                are read to the end exactly once.
    """
    return read_buffer(IoBuffer.from_source(source))
