"""
Mach-O and FAT (Universal) type definitions.

Magic values are given as read big-endian from offset 0. A "CIGAM" magic
is the byte-swapped form, meaning the header was written little-endian.

References:
- <mach-o/loader.h>, <mach-o/fat.h>, <mach/machine.h>
"""

from dataclasses import dataclass
from typing import ClassVar

from ..format_detect import (
    FAT_CIGAM,
    FAT_CIGAM_64,
    FAT_MAGIC_64,
    MH_CIGAM,
    MH_CIGAM_64,
    MH_MAGIC_64,
)

# =============================================================================
# Constants
# =============================================================================

# CPU types
CPU_ARCH_ABI64 = 0x01000000
CPU_TYPE_X86 = 7
CPU_TYPE_X86_64 = CPU_TYPE_X86 | CPU_ARCH_ABI64
CPU_TYPE_ARM = 12
CPU_TYPE_ARM64 = CPU_TYPE_ARM | CPU_ARCH_ABI64
CPU_TYPE_POWERPC = 18
CPU_TYPE_POWERPC64 = CPU_TYPE_POWERPC | CPU_ARCH_ABI64

CPU_TYPE_NAMES: dict[int, str] = {
    CPU_TYPE_X86: "x86",
    CPU_TYPE_X86_64: "x86_64",
    CPU_TYPE_ARM: "arm",
    CPU_TYPE_ARM64: "arm64",
    CPU_TYPE_POWERPC: "ppc",
    CPU_TYPE_POWERPC64: "ppc64",
}

# File types (mach_header.filetype); reported, never enforced
MH_OBJECT = 0x1
MH_EXECUTE = 0x2
MH_DYLIB = 0x6
MH_BUNDLE = 0x7

FILE_TYPE_NAMES: dict[int, str] = {
    MH_OBJECT: "object",
    MH_EXECUTE: "execute",
    MH_DYLIB: "dylib",
    MH_BUNDLE: "bundle",
}

LITTLE_ENDIAN_MAGICS: frozenset[int] = frozenset(
    {MH_CIGAM, MH_CIGAM_64, FAT_CIGAM, FAT_CIGAM_64}
)
MAGICS_64: frozenset[int] = frozenset(
    {MH_MAGIC_64, MH_CIGAM_64, FAT_MAGIC_64, FAT_CIGAM_64}
)

# Structure sizes
MACH_HEADER_SIZE = 28
MACH_HEADER_64_SIZE = 32  # Adds a reserved field after flags
FAT_HEADER_SIZE = 8
FAT_ARCH_SIZE = 20
FAT_ARCH_64_SIZE = 32


# =============================================================================
# Mach-O Structures
# =============================================================================


@dataclass(frozen=True)
class MachHeader:
    """Mach-O header (mach_header / mach_header_64), reserved field excluded."""

    magic: int
    cputype: int
    cpusubtype: int
    filetype: int
    ncmds: int
    sizeofcmds: int
    flags: int

    # Field offsets from the start of the header
    FIELD_OFFSETS: ClassVar[dict[str, int]] = {
        "cputype": 4,
        "cpusubtype": 8,
        "filetype": 12,
        "ncmds": 16,
        "sizeofcmds": 20,
        "flags": 24,
    }

    @property
    def is_64(self) -> bool:
        return self.magic in MAGICS_64

    @property
    def is_little_endian(self) -> bool:
        return self.magic in LITTLE_ENDIAN_MAGICS

    @property
    def cpu_name(self) -> str:
        return cpu_type_name(self.cputype)

    @property
    def filetype_name(self) -> str | None:
        return FILE_TYPE_NAMES.get(self.filetype)


@dataclass(frozen=True)
class FatArch:
    """One fat_arch / fat_arch_64 entry of a Universal binary.

    The 64-bit entry has 8-byte offset and size fields and a trailing
    reserved word, which is not decoded.
    """

    cputype: int
    cpusubtype: int
    offset: int  # File offset of this architecture's image
    size: int
    align: int  # Power of two

    @property
    def cpu_name(self) -> str:
        return cpu_type_name(self.cputype)


# =============================================================================
# Helper Functions
# =============================================================================


def cpu_type_name(cputype: int) -> str:
    """Map a Mach-O cputype code to a short name, "unknown" if unmapped."""
    return CPU_TYPE_NAMES.get(cputype, "unknown")


def magic_byte_order(magic: int) -> tuple[bool, bool]:
    """Return (is_little_endian, is_64) for a Mach-O or FAT magic."""
    return magic in LITTLE_ENDIAN_MAGICS, magic in MAGICS_64

