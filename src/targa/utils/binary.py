"""Binary I/O utilities for TGA parsing."""

import io
import logging
import os
import struct
from enum import Enum
from typing import BinaryIO, Union

from ..errors import SeekError, ShortReadError, TGAIOError

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, str, os.PathLike, BinaryIO]


class ByteOrder(Enum):
    """Byte order enum for struct packing/unpacking."""
    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class IoBuffer:
    """Seekable in-memory binary reader with endian support.

    Every read is length-checked: asking for more bytes than remain raises
    ShortReadError instead of returning a truncated result.
    """

    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order

    @classmethod
    def from_bytes(cls, data: bytes, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from bytes."""
        return cls(io.BytesIO(bytes(data)), byte_order)

    @classmethod
    def from_file(cls, filepath, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from file path."""
        try:
            with open(filepath, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise TGAIOError(f"Failed to read {filepath}: {e}") from e
        return cls.from_bytes(data, byte_order)

    @classmethod
    def from_stream(cls, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Read a whole stream once and wrap the result."""
        try:
            data = stream.read()
        except OSError as e:
            raise TGAIOError(f"Failed to read stream: {e}") from e
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected a binary stream, read returned {type(data).__name__}")
        logger.debug(f"Buffered {len(data)} bytes from stream")
        return cls.from_bytes(data, byte_order)

    @classmethod
    def from_source(cls, source: Source, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from bytes, a file path, or any readable binary stream."""
        if isinstance(source, IoBuffer):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls.from_bytes(source, byte_order)
        if isinstance(source, (str, os.PathLike)):
            return cls.from_file(source, byte_order)
        if hasattr(source, 'read'):
            return cls.from_stream(source, byte_order)
        raise TypeError(f"Cannot read TGA data from {type(source).__name__}")

    @property
    def size(self) -> int:
        """Total number of bytes in the buffer."""
        current = self.stream.tell()
        end = self.stream.seek(0, io.SEEK_END)
        self.stream.seek(current)
        return end

    @property
    def position(self) -> int:
        """Current position in stream."""
        return self.stream.tell()

    @position.setter
    def position(self, value: int):
        """Seek to position."""
        self.seek(value)

    @property
    def remaining(self) -> int:
        """Bytes left between the current position and the end."""
        return max(self.size - self.position, 0)

    def has_bytes(self, num_bytes: int) -> bool:
        """Check if there are at least num_bytes remaining."""
        return self.remaining >= num_bytes

    def skip(self, num_bytes: int):
        """Skip bytes from current position."""
        self.seek(num_bytes, io.SEEK_CUR)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Seek in stream (whence: 0=start, 1=current, 2=end).

        Raises SeekError when the target lies before the start of the stream.
        """
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self.position + offset
        elif whence == io.SEEK_END:
            target = self.size + offset
        else:
            raise ValueError(f"Unknown whence: {whence}")

        if target < 0:
            raise SeekError(offset, whence, target)
        return self.stream.seek(target, io.SEEK_SET)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        if count < 0:
            raise ValueError(f"Negative read length: {count}")
        data = self.stream.read(count)
        if len(data) != count:
            raise ShortReadError(count, len(data))
        return data

    def _unpack(self, code: str, size: int):
        fmt = f"{self.byte_order.value}{code}"
        return struct.unpack(fmt, self.read_bytes(size))[0]

    def read_byte(self) -> int:
        """Read single byte (0-255)."""
        return self.read_bytes(1)[0]

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self.read_byte()

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer."""
        return self._unpack('H', 2)

    def read_int16(self) -> int:
        """Read signed 16-bit integer."""
        return self._unpack('h', 2)

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        return self._unpack('I', 4)
