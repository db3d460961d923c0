"""Tests for the bounds-checked field readers."""

import struct

import pytest

from exe_inspector.fields import (
    OutOfBounds,
    has,
    read_u16_be,
    read_u16_le,
    read_u32,
    read_u32_be,
    read_u32_le,
    read_u64_be,
    read_u64_le,
)


class TestHas:
    """Tests for the has() region predicate."""

    def test_region_inside(self):
        assert has(b"\x00" * 8, 4, 4) is True

    def test_region_past_end(self):
        assert has(b"\x00" * 8, 5, 4) is False

    def test_zero_length_at_end(self):
        """An empty region at the end of the buffer is present."""
        assert has(b"\x00" * 8, 8, 0) is True

    def test_negative_offset(self):
        assert has(b"\x00" * 8, -1, 2) is False

    def test_empty_buffer(self):
        assert has(b"", 0, 1) is False


class TestReaders:
    """Tests for fixed-width integer readers."""

    @pytest.mark.parametrize("value", [0, 1, 0x1234, 0x8000, 0xFFFF])
    def test_u16_roundtrip(self, value: int):
        assert read_u16_le(struct.pack("<H", value), 0) == value
        assert read_u16_be(struct.pack(">H", value), 0) == value

    @pytest.mark.parametrize(
        "value", [0, 1, 0x7F, 0x12345678, 0x80000000, 0xFFFFFFFF]
    )
    def test_u32_roundtrip(self, value: int):
        assert read_u32_le(struct.pack("<I", value), 0) == value
        assert read_u32_be(struct.pack(">I", value), 0) == value

    @pytest.mark.parametrize(
        "value", [0, 0xFFFFFFFF, 0x100000000, 0x0123456789ABCDEF, 2**64 - 1]
    )
    def test_u64_roundtrip(self, value: int):
        assert read_u64_le(struct.pack("<Q", value), 0) == value
        assert read_u64_be(struct.pack(">Q", value), 0) == value

    def test_byte_order(self):
        """Little-endian puts byte[0] lowest; big-endian puts it highest."""
        data = bytes([0x01, 0x02, 0x03, 0x04])
        assert read_u32_le(data, 0) == 0x04030201
        assert read_u32_be(data, 0) == 0x01020304
        assert read_u16_le(data, 2) == 0x0403
        assert read_u16_be(data, 2) == 0x0304

    def test_read_at_offset(self):
        data = bytearray(12)
        struct.pack_into("<I", data, 8, 0xDEADBEEF)
        assert read_u32_le(data, 8) == 0xDEADBEEF

    def test_read_u32_dispatches_on_order(self):
        data = bytes([0xAA, 0xBB, 0xCC, 0xDD])
        assert read_u32(data, 0, little_endian=True) == 0xDDCCBBAA
        assert read_u32(data, 0, little_endian=False) == 0xAABBCCDD

    def test_accepts_memoryview(self):
        data = memoryview(struct.pack("<H", 0x5A4D))
        assert read_u16_le(data, 0) == 0x5A4D


class TestOutOfBounds:
    """Tests for reads that do not fit in the buffer."""

    @pytest.mark.parametrize(
        "reader,width",
        [
            (read_u16_le, 2),
            (read_u16_be, 2),
            (read_u32_le, 4),
            (read_u32_be, 4),
            (read_u64_le, 8),
            (read_u64_be, 8),
        ],
    )
    def test_short_buffer_raises(self, reader, width: int):
        data = b"\x00" * (width - 1)
        with pytest.raises(OutOfBounds, match="exceeds buffer"):
            reader(data, 0)

    def test_offset_past_end_raises(self):
        with pytest.raises(OutOfBounds):
            read_u32_le(b"\x00" * 16, 13)

    def test_negative_offset_raises(self):
        with pytest.raises(OutOfBounds, match=r"at offset -2 exceeds"):
            read_u16_le(b"\x00" * 16, -2)

    def test_message_uses_hex_offset(self):
        with pytest.raises(
            OutOfBounds, match=r"4 bytes at offset 0x1d exceeds buffer of 16 bytes"
        ):
            read_u32_le(b"\x00" * 16, 0x1D)

    def test_exception_attributes(self):
        with pytest.raises(OutOfBounds) as excinfo:
            read_u32_be(b"\x00" * 6, 4)
        assert excinfo.value.offset == 4
        assert excinfo.value.width == 4
        assert excinfo.value.length == 6

    def test_is_value_error(self):
        """OutOfBounds can be caught as ValueError."""
        with pytest.raises(ValueError):
            read_u64_le(b"", 0)
