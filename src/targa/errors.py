"""Exceptions raised while reading and decoding TGA files."""

from typing import Optional, Tuple


class TGAError(Exception):
    """Base class for every TGA read/decode failure."""


class TGAIOError(TGAError):
    """The underlying byte source failed to deliver data."""


class SeekError(TGAError, ValueError):
    """A section offset resolves to a position outside the stream."""

    def __init__(self, offset: int, whence: int, position: int):
        self.offset = offset
        self.whence = whence
        self.position = position
        super().__init__(
            f"Cannot seek to offset {offset} (whence={whence}): "
            f"resulting position {position} is out of range"
        )


class ShortReadError(TGAError, ValueError):
    """Fewer bytes are available than a section declares."""

    def __init__(self, expected: int, actual: int, what: str = "section"):
        self.expected = expected
        self.actual = actual
        self.what = what
        super().__init__(f"Short read of {what}: expected {expected} bytes, got {actual}")


class MalformedStructureError(TGAError, ValueError):
    """A fixed-size structure was decoded from too few bytes."""

    def __init__(self, structure: str, expected: int, actual: int):
        self.structure = structure
        self.expected = expected
        self.actual = actual
        super().__init__(f"{structure} needs {expected} bytes, got {actual}")


class UnsupportedImageTypeError(TGAError, ValueError):
    """The header names an image type this decoder cannot assemble."""

    def __init__(self, image_type: int):
        self.image_type = image_type
        super().__init__(f"Image type '{image_type}' not supported")


class UnsupportedPixelDepthError(TGAError, ValueError):
    """True-color data with a pixel depth the assembler does not convert."""

    def __init__(self, bits_per_pixel: int):
        self.bits_per_pixel = bits_per_pixel
        super().__init__(f"Pixel depth of {bits_per_pixel} bits not supported")


class PixelOutOfRangeError(TGAError, ValueError):
    """An output coordinate mapped to a source pixel outside the raster."""

    def __init__(self, output: Tuple[int, int], source: Tuple[int, int],
                 size: Optional[Tuple[int, int]] = None):
        self.output = output
        self.source = source
        self.size = size
        msg = f"Pixel {output} maps to source {source} outside the raster"
        if size is not None:
            msg += f" ({size[0]}x{size[1]})"
        super().__init__(msg)
