"""targa - TGA (Truevision Graphics Adapter) image reader."""
from .errors import (
    TGAError, TGAIOError, SeekError, ShortReadError, MalformedStructureError,
    UnsupportedImageTypeError, UnsupportedPixelDepthError, PixelOutOfRangeError,
)
from .header import Header, ImageType, ImageOrigin, TargaSize
from .footer import Footer, Version, SIGNATURE
from .sections import (
    SectionConfig, Whence, HEADER_SECTION, FOOTER_SECTION, new_section, read_section,
)
from .tga_file import TGAFile, Image, pixel_at, read
from .decoder import DecoderConfig, assemble, decode, source_coordinate

__version__ = "1.0.0"

__all__ = [
    # Errors
    'TGAError', 'TGAIOError', 'SeekError', 'ShortReadError', 'MalformedStructureError',
    'UnsupportedImageTypeError', 'UnsupportedPixelDepthError', 'PixelOutOfRangeError',
    # Models
    'Header', 'ImageType', 'ImageOrigin', 'TargaSize',
    'Footer', 'Version', 'SIGNATURE',
    'TGAFile', 'Image',
    # Sections
    'SectionConfig', 'Whence', 'HEADER_SECTION', 'FOOTER_SECTION',
    'new_section', 'read_section',
    # Decoding
    'DecoderConfig', 'assemble', 'decode', 'read', 'pixel_at', 'source_coordinate',
]
