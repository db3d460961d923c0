"""
Mach-O header decoding package for exe-inspector.

This package provides:
- types: Mach-O/FAT constants, CPU type names, MachHeader and FatArch
- decoder: decode_macho for single-architecture headers
- fat: decode_fat for Universal binaries
"""

from .decoder import MachOReport, decode_macho
from .fat import FatReport, decode_fat, read_fat_u64
from .types import (
    # Structs
    MachHeader,
    FatArch,
    # CPU types
    CPU_ARCH_ABI64,
    CPU_TYPE_X86,
    CPU_TYPE_X86_64,
    CPU_TYPE_ARM,
    CPU_TYPE_ARM64,
    CPU_TYPE_POWERPC,
    CPU_TYPE_POWERPC64,
    CPU_TYPE_NAMES,
    # File types
    MH_OBJECT,
    MH_EXECUTE,
    MH_DYLIB,
    MH_BUNDLE,
    # Structure sizes
    MACH_HEADER_SIZE,
    MACH_HEADER_64_SIZE,
    FAT_HEADER_SIZE,
    FAT_ARCH_SIZE,
    FAT_ARCH_64_SIZE,
    # Helper functions
    cpu_type_name,
    magic_byte_order,
)

__all__ = [
    # Decoding
    "MachOReport",
    "decode_macho",
    "FatReport",
    "decode_fat",
    "read_fat_u64",
    # Structs
    "MachHeader",
    "FatArch",
    # CPU types
    "CPU_ARCH_ABI64",
    "CPU_TYPE_X86",
    "CPU_TYPE_X86_64",
    "CPU_TYPE_ARM",
    "CPU_TYPE_ARM64",
    "CPU_TYPE_POWERPC",
    "CPU_TYPE_POWERPC64",
    "CPU_TYPE_NAMES",
    # File types
    "MH_OBJECT",
    "MH_EXECUTE",
    "MH_DYLIB",
    "MH_BUNDLE",
    # Structure sizes
    "MACH_HEADER_SIZE",
    "MACH_HEADER_64_SIZE",
    "FAT_HEADER_SIZE",
    "FAT_ARCH_SIZE",
    "FAT_ARCH_64_SIZE",
    # Helper functions
    "cpu_type_name",
    "magic_byte_order",
]
