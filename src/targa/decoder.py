"""
TGA Decoder - assemble raw targa pixel data into an RGBA image

The output is always top-down, left-to-right. Each output coordinate is
mapped back to the coordinate it was stored at, according to the scan
origin in the header's image descriptor, and the stored BGR(A) bytes are
converted to an RGBA sample.

Supported:
  - Uncompressed true-color images (type 2), 24 and 32 bits per pixel

Everything else (color-mapped, grayscale, RLE, 16-bit) is rejected with a
typed error before any pixel is touched.

Known issue: the right-hand origins (TopRight, BottomRight) address
`width - x` / `height - y`, one column (and for BottomRight one row) past
the raster edge, so decoding such files fails with PixelOutOfRangeError
unless DecoderConfig.correct_right_origin is set.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np
from PIL import Image

from .errors import (
    PixelOutOfRangeError,
    ShortReadError,
    UnsupportedImageTypeError,
    UnsupportedPixelDepthError,
)
from .header import Header, ImageOrigin, ImageType, TargaSize
from .tga_file import read_buffer
from .utils.binary import IoBuffer, Source

logger = logging.getLogger(__name__)

SUPPORTED_DEPTHS = (TargaSize.TARGA_24, TargaSize.TARGA_32)

Transform = Callable[[int, int, int, int], Tuple[int, int]]


@dataclass
class DecoderConfig:
    """Options for assembling pixel data."""
    # Use width - x - 1 / height - y - 1 for the right-hand origins.
    correct_right_origin: bool = False
    # Keep the 4th stored byte of 32-bit pixels instead of forcing 255.
    use_stored_alpha: bool = False


# ============================================================================
# SCAN ORIGIN TRANSFORMS
# ============================================================================

def _bottom_left(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return x, height - y - 1


def _top_left(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return x, y


def _top_right(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return width - x, y


def _bottom_right(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return width - x, height - y


def _top_right_corrected(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return width - x - 1, y


def _bottom_right_corrected(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return width - x - 1, height - y - 1


ORIGIN_TRANSFORMS: Dict[ImageOrigin, Transform] = {
    ImageOrigin.BOTTOM_LEFT: _bottom_left,
    ImageOrigin.BOTTOM_RIGHT: _bottom_right,
    ImageOrigin.TOP_LEFT: _top_left,
    ImageOrigin.TOP_RIGHT: _top_right,
}

CORRECTED_ORIGIN_TRANSFORMS: Dict[ImageOrigin, Transform] = {
    **ORIGIN_TRANSFORMS,
    ImageOrigin.BOTTOM_RIGHT: _bottom_right_corrected,
    ImageOrigin.TOP_RIGHT: _top_right_corrected,
}


def origin_transform(origin: ImageOrigin, correct_right_origin: bool = False) -> Transform:
    table = CORRECTED_ORIGIN_TRANSFORMS if correct_right_origin else ORIGIN_TRANSFORMS
    return table[ImageOrigin(origin)]


def source_coordinate(origin: ImageOrigin, x: int, y: int, width: int, height: int,
                      correct_right_origin: bool = False) -> Tuple[int, int]:
    """Map output (device) coordinate (x, y) to where the pixel is stored."""
    return origin_transform(origin, correct_right_origin)(x, y, width, height)


# ============================================================================
# ASSEMBLY
# ============================================================================

def check_supported(header: Header):
    """Raise if the header describes data the assembler cannot convert."""
    if header.image_kind is not ImageType.TRUE_COLOR:
        raise UnsupportedImageTypeError(header.image_type)
    if header.bits_per_pixel not in SUPPORTED_DEPTHS:
        raise UnsupportedPixelDepthError(header.bits_per_pixel)


def assemble(header: Header, data: bytes, config: Optional[DecoderConfig] = None) -> Image.Image:
    """
    Convert raw pixel data into a top-down RGBA image.

    Args:
        header: Decoded header of the file the data came from
        data: The pixel data block (width * height * bytes_per_pixel bytes)
        config: Assembly options, defaults when None

    Returns:
        PIL image in RGBA mode, header.width x header.height
    """
    config = config or DecoderConfig()
    check_supported(header)

    width, height = header.width, header.height
    bytes_per_pixel = header.bytes_per_pixel
    if len(data) < header.image_bytes:
        raise ShortReadError(header.image_bytes, len(data), "image data")

    origin = header.image_origin
    transform = origin_transform(origin, config.correct_right_origin)
    logger.debug(f"Assembling {width}x{height} {header.bits_per_pixel}bpp from {origin.label}")

    if width == 0 or height == 0:
        return Image.new("RGBA", (width, height))

    # Source coordinate of every output pixel, row-major like the output
    out_x, out_y = np.meshgrid(np.arange(width), np.arange(height))
    src_x, src_y = transform(out_x, out_y, width, height)

    # Same bounds as pixel_at; the first offender in output order is reported
    outside = (src_x < 0) | (src_y < 0) | (src_x >= width) | (src_y >= height)
    if outside.any():
        y, x = (int(v) for v in np.argwhere(outside)[0])
        raise PixelOutOfRangeError((x, y), (int(src_x[y, x]), int(src_y[y, x])), (width, height))

    stored = np.frombuffer(data, dtype=np.uint8, count=header.image_bytes)
    stored = stored.reshape(height, width, bytes_per_pixel)[src_y, src_x]

    raster = np.empty((height, width, 4), dtype=np.uint8)
    raster[..., 0] = stored[..., 2]
    raster[..., 1] = stored[..., 1]
    raster[..., 2] = stored[..., 0]
    if config.use_stored_alpha and bytes_per_pixel == 4:
        raster[..., 3] = stored[..., 3]
    else:
        raster[..., 3] = 255

    return Image.frombytes("RGBA", (width, height), raster.tobytes())


def decode(source: Source, config: Optional[DecoderConfig] = None) -> Image.Image:
    """
    Decode a TGA file into an RGBA image.

    The source (bytes, path or binary stream) is read once. Unsupported
    image types are rejected right after the header, before the pixel data
    section is located.
    """
    buffer = IoBuffer.from_source(source)
    tga = read_buffer(buffer, validate=check_supported)
    return assemble(tga.header, tga.image.data, config)
