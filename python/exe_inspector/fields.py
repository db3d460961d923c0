"""
Bounds-checked, endian-aware integer readers.

Every reader takes a byte buffer and an offset and either returns the
unsigned integer stored there or raises OutOfBounds. Nothing here ever
reads past the end of the buffer.
"""

import struct

Buffer = bytes | bytearray | memoryview


class OutOfBounds(ValueError):
    """Raised when a fixed-width field does not fit inside the buffer."""

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        where = f"0x{offset:x}" if offset >= 0 else f"{offset}"
        super().__init__(
            f"Read of {width} bytes at offset {where} exceeds buffer "
            f"of {length} bytes"
        )


def has(data: Buffer, offset: int, length: int) -> bool:
    """Check that data[offset : offset + length] is fully present."""
    return offset >= 0 and length >= 0 and offset + length <= len(data)


def _read(fmt: struct.Struct, data: Buffer, offset: int) -> int:
    if not has(data, offset, fmt.size):
        raise OutOfBounds(offset, fmt.size, len(data))
    return fmt.unpack_from(data, offset)[0]


_U16_LE = struct.Struct("<H")
_U16_BE = struct.Struct(">H")
_U32_LE = struct.Struct("<I")
_U32_BE = struct.Struct(">I")
_U64_LE = struct.Struct("<Q")
_U64_BE = struct.Struct(">Q")


def read_u16_le(data: Buffer, offset: int) -> int:
    return _read(_U16_LE, data, offset)


def read_u16_be(data: Buffer, offset: int) -> int:
    return _read(_U16_BE, data, offset)


def read_u32_le(data: Buffer, offset: int) -> int:
    return _read(_U32_LE, data, offset)


def read_u32_be(data: Buffer, offset: int) -> int:
    return _read(_U32_BE, data, offset)


def read_u64_le(data: Buffer, offset: int) -> int:
    return _read(_U64_LE, data, offset)


def read_u64_be(data: Buffer, offset: int) -> int:
    return _read(_U64_BE, data, offset)


def read_u32(data: Buffer, offset: int, little_endian: bool) -> int:
    """Read a u32 in the given byte order."""
    if little_endian:
        return read_u32_le(data, offset)
    return read_u32_be(data, offset)
