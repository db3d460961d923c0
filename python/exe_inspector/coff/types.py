"""
PE/COFF type definitions for header decoding.

Only the fixed-layout part of a PE image is described here: the DOS
header field pointing at the PE signature, the 20-byte COFF file header,
and the magic that opens the optional header.

References:
- Microsoft PE/COFF Specification
- https://learn.microsoft.com/en-us/windows/win32/debug/pe-format
"""

import struct
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

from ..fields import Buffer, OutOfBounds, has

# =============================================================================
# Constants
# =============================================================================

# PE Signature
PE_SIGNATURE = b"PE\x00\x00"
PE_SIGNATURE_OFFSET_LOCATION = 0x3C  # Offset in DOS header where e_lfanew lives

# Machine types
IMAGE_FILE_MACHINE_UNKNOWN = 0x0
IMAGE_FILE_MACHINE_I386 = 0x14C
IMAGE_FILE_MACHINE_ARM = 0x1C0
IMAGE_FILE_MACHINE_ARMNT = 0x1C4
IMAGE_FILE_MACHINE_IA64 = 0x200
IMAGE_FILE_MACHINE_AMD64 = 0x8664
IMAGE_FILE_MACHINE_ARM64 = 0xAA64

MACHINE_NAMES: dict[int, str] = {
    IMAGE_FILE_MACHINE_I386: "i386",
    IMAGE_FILE_MACHINE_ARM: "arm",
    IMAGE_FILE_MACHINE_ARMNT: "armnt",
    IMAGE_FILE_MACHINE_IA64: "ia64",
    IMAGE_FILE_MACHINE_AMD64: "amd64",
    IMAGE_FILE_MACHINE_ARM64: "arm64",
}

# Optional header magic
IMAGE_NT_OPTIONAL_HDR32_MAGIC = 0x10B  # PE32
IMAGE_NT_OPTIONAL_HDR64_MAGIC = 0x20B  # PE32+

# File characteristics
IMAGE_FILE_RELOCS_STRIPPED = 0x0001
IMAGE_FILE_EXECUTABLE_IMAGE = 0x0002
IMAGE_FILE_LINE_NUMS_STRIPPED = 0x0004
IMAGE_FILE_LOCAL_SYMS_STRIPPED = 0x0008
IMAGE_FILE_LARGE_ADDRESS_AWARE = 0x0020
IMAGE_FILE_32BIT_MACHINE = 0x0100
IMAGE_FILE_DEBUG_STRIPPED = 0x0200
IMAGE_FILE_SYSTEM = 0x1000
IMAGE_FILE_DLL = 0x2000

# Structure sizes
COFF_HEADER_SIZE = 20
OPTIONAL_MAGIC_SIZE = 2


# =============================================================================
# PE/COFF Structures
# =============================================================================


@dataclass(frozen=True)
class CoffHeader:
    """COFF file header (IMAGE_FILE_HEADER).

    This 20-byte header comes right after the PE signature.
    """

    Machine: int  # Target machine type (e.g., AMD64)
    NumberOfSections: int
    TimeDateStamp: int  # Seconds since the Unix epoch
    PointerToSymbolTable: int  # Usually 0 for executables
    NumberOfSymbols: int  # Usually 0 for executables
    SizeOfOptionalHeader: int
    Characteristics: int  # File characteristics flags

    STRUCT_FMT: ClassVar[str] = "<HHIIIHH"
    SIZE: ClassVar[int] = COFF_HEADER_SIZE

    @classmethod
    def from_bytes(cls, data: Buffer, offset: int = 0) -> "CoffHeader":
        """Parse COFF header from binary data.

        Raises:
            OutOfBounds: If fewer than 20 bytes are available at offset
        """
        if not has(data, offset, cls.SIZE):
            raise OutOfBounds(offset, cls.SIZE, len(data))

        fields = struct.unpack_from(cls.STRUCT_FMT, data, offset)
        return cls(*fields)

    @property
    def machine_name(self) -> str:
        return MACHINE_NAMES.get(self.Machine, "unknown")

    @property
    def timestamp(self) -> datetime:
        """TimeDateStamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.TimeDateStamp, tz=timezone.utc)

    @property
    def is_dll(self) -> bool:
        """Check if this is a DLL."""
        return bool(self.Characteristics & IMAGE_FILE_DLL)

    @property
    def is_executable(self) -> bool:
        """Check if this is an executable image."""
        return bool(self.Characteristics & IMAGE_FILE_EXECUTABLE_IMAGE)


# =============================================================================
# Helper Functions
# =============================================================================


def optional_magic_name(magic: int) -> str:
    """Classify an optional header magic as PE32, PE32+ or unknown."""
    if magic == IMAGE_NT_OPTIONAL_HDR32_MAGIC:
        return "PE32"
    if magic == IMAGE_NT_OPTIONAL_HDR64_MAGIC:
        return "PE32+"
    return "unknown"
