"""Tests for PE/COFF type definitions and parsing."""

import struct
from datetime import datetime, timezone

import pytest

from exe_inspector.coff.types import (
    CoffHeader,
    COFF_HEADER_SIZE,
    IMAGE_FILE_DLL,
    IMAGE_FILE_EXECUTABLE_IMAGE,
    IMAGE_FILE_MACHINE_AMD64,
    IMAGE_FILE_MACHINE_ARM64,
    IMAGE_FILE_MACHINE_I386,
    IMAGE_NT_OPTIONAL_HDR32_MAGIC,
    IMAGE_NT_OPTIONAL_HDR64_MAGIC,
    PE_SIGNATURE,
    optional_magic_name,
)
from exe_inspector.fields import OutOfBounds


class TestCoffHeader:
    """Tests for COFF header parsing."""

    def test_parse_valid_header(self):
        """Test parsing a valid COFF header."""
        data = bytearray(20)
        struct.pack_into(
            "<HHIIIHH",
            data,
            0,
            0x8664,  # Machine = AMD64
            5,  # NumberOfSections
            0x12345678,  # TimeDateStamp
            0,  # PointerToSymbolTable
            0,  # NumberOfSymbols
            240,  # SizeOfOptionalHeader
            IMAGE_FILE_EXECUTABLE_IMAGE | IMAGE_FILE_DLL,  # Characteristics
        )

        header = CoffHeader.from_bytes(data)
        assert header.Machine == 0x8664
        assert header.NumberOfSections == 5
        assert header.TimeDateStamp == 0x12345678
        assert header.SizeOfOptionalHeader == 240
        assert header.Characteristics == 0x2002

    def test_parse_at_offset(self):
        data = bytearray(0x84 + 20)
        struct.pack_into("<HHIIIHH", data, 0x84, 0x14C, 2, 0, 0, 0, 0xE0, 0x102)

        header = CoffHeader.from_bytes(data, 0x84)
        assert header.Machine == IMAGE_FILE_MACHINE_I386
        assert header.SizeOfOptionalHeader == 0xE0

    def test_data_too_short_raises(self):
        """Test that short data raises OutOfBounds."""
        data = bytearray(19)

        with pytest.raises(OutOfBounds):
            CoffHeader.from_bytes(data)

    def test_is_dll_property(self):
        """Test is_dll property."""
        data = bytearray(20)
        struct.pack_into("<HHIIIHH", data, 0, 0x8664, 1, 0, 0, 0, 240, IMAGE_FILE_DLL)

        header = CoffHeader.from_bytes(data)
        assert header.is_dll is True

        # Without DLL flag
        struct.pack_into(
            "<HHIIIHH", data, 0, 0x8664, 1, 0, 0, 0, 240, IMAGE_FILE_EXECUTABLE_IMAGE
        )
        header = CoffHeader.from_bytes(data)
        assert header.is_dll is False

    def test_is_executable_property(self):
        """Test is_executable property."""
        data = bytearray(20)
        struct.pack_into(
            "<HHIIIHH", data, 0, 0x8664, 1, 0, 0, 0, 240, IMAGE_FILE_EXECUTABLE_IMAGE
        )

        header = CoffHeader.from_bytes(data)
        assert header.is_executable is True

    def test_timestamp_is_utc(self):
        header = CoffHeader(0x8664, 1, 1_700_000_000, 0, 0, 240, 0x22)
        assert header.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "machine,name",
        [
            (IMAGE_FILE_MACHINE_I386, "i386"),
            (IMAGE_FILE_MACHINE_AMD64, "amd64"),
            (IMAGE_FILE_MACHINE_ARM64, "arm64"),
            (0x1234, "unknown"),
        ],
    )
    def test_machine_name(self, machine: int, name: str):
        header = CoffHeader(machine, 0, 0, 0, 0, 0, 0)
        assert header.machine_name == name


class TestOptionalMagicName:
    """Tests for optional header magic classification."""

    def test_pe32(self):
        assert optional_magic_name(IMAGE_NT_OPTIONAL_HDR32_MAGIC) == "PE32"

    def test_pe32_plus(self):
        assert optional_magic_name(IMAGE_NT_OPTIONAL_HDR64_MAGIC) == "PE32+"

    def test_other(self):
        assert optional_magic_name(0x107) == "unknown"


class TestConstants:
    """Tests for PE constant values."""

    def test_pe_signature_value(self):
        assert PE_SIGNATURE == b"PE\x00\x00"
        assert len(PE_SIGNATURE) == 4

    def test_coff_header_size(self):
        assert COFF_HEADER_SIZE == struct.calcsize(CoffHeader.STRUCT_FMT)
