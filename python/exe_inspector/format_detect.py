"""
Binary format detection utilities.

This module classifies an in-memory buffer as PE, Mach-O, FAT (Universal)
Mach-O or unknown by looking at its leading magic bytes, so that the
generic decode API can dispatch to the right header decoder.

The 4-byte Mach-O and FAT magics are checked before the 2-byte "MZ"
signature since they are unambiguous.
"""

from enum import Enum

from .fields import Buffer, has, read_u32_be


# Magic bytes for format detection
DOS_MAGIC = b"MZ"

# Mach-O magics as read big-endian from offset 0
MH_MAGIC = 0xFEEDFACE  # 32-bit, big-endian
MH_CIGAM = 0xCEFAEDFE  # 32-bit, little-endian
MH_MAGIC_64 = 0xFEEDFACF  # 64-bit, big-endian
MH_CIGAM_64 = 0xCFFAEDFE  # 64-bit, little-endian

# FAT (Universal) magics as read big-endian from offset 0
FAT_MAGIC = 0xCAFEBABE
FAT_CIGAM = 0xBEBAFECA
FAT_MAGIC_64 = 0xCAFEBABF
FAT_CIGAM_64 = 0xBFBAFECA

MACHO_MAGICS: frozenset[int] = frozenset(
    {MH_MAGIC, MH_CIGAM, MH_MAGIC_64, MH_CIGAM_64}
)
FAT_MAGICS: frozenset[int] = frozenset(
    {FAT_MAGIC, FAT_CIGAM, FAT_MAGIC_64, FAT_CIGAM_64}
)


class FormatKind(Enum):
    """Container format of a buffer."""

    PE = "pe"
    MACHO = "macho"
    FAT_MACHO = "fat"
    UNKNOWN = "unknown"


def read_magic(data: Buffer) -> int | None:
    """Return the first 4 bytes read big-endian, or None if too short."""
    if not has(data, 0, 4):
        return None
    return read_u32_be(data, 0)


def detect(data: Buffer) -> FormatKind:
    """Detect the container format of a buffer.

    Args:
        data: Binary data (only the first 4 bytes are examined)

    Returns:
        The FormatKind; FormatKind.UNKNOWN when nothing matches
    """
    if len(data) < 2:
        return FormatKind.UNKNOWN

    magic = read_magic(data)
    if magic in FAT_MAGICS:
        return FormatKind.FAT_MACHO
    if magic in MACHO_MAGICS:
        return FormatKind.MACHO

    if bytes(data[:2]) == DOS_MAGIC:
        return FormatKind.PE

    return FormatKind.UNKNOWN


def is_pe_binary(data: Buffer) -> bool:
    """Check if a buffer starts with the DOS "MZ" signature."""
    return detect(data) is FormatKind.PE


def is_macho_binary(data: Buffer) -> bool:
    """Check if a buffer is a single-architecture or FAT Mach-O."""
    return detect(data) in (FormatKind.MACHO, FormatKind.FAT_MACHO)
