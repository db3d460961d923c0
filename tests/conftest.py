import pytest
import pathlib

from binary_test_utils import make_fat, make_macho, make_pe


@pytest.fixture
def pe_amd64() -> bytearray:
    """PE32+ image header for x64 with 3 sections."""
    return make_pe(machine=0x8664, num_sections=3, optional_magic=0x20B)


@pytest.fixture
def macho_arm64() -> bytearray:
    """64-bit little-endian arm64 executable header."""
    return make_macho(magic=0xCFFAEDFE, cputype=0x0100000C, cpusubtype=0)


@pytest.fixture
def fat_x86_x86_64() -> bytearray:
    """32-bit big-endian Universal header with x86 and x86_64 entries."""
    return make_fat(
        [
            (7, 3, 0x1000, 0x4000, 12),
            (0x01000007, 3, 0x5000, 0x6000, 12),
        ]
    )


@pytest.fixture
def write_binary(tmp_path: pathlib.Path):
    """Write bytes to a file under tmp_path and return its path."""

    def _write(data: bytes | bytearray, name: str = "binary") -> pathlib.Path:
        path = tmp_path / name
        path.write_bytes(bytes(data))
        return path

    return _write
