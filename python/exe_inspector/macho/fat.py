"""
FAT (Universal) Mach-O header decoding.

Layout after the 4-byte magic:

  Offset | Size | Field
  -------|------|------
  0x04   | 4    | nfat_arch
  0x08   | ...  | nfat_arch entries of 20 bytes (fat_arch) or 32 bytes (fat_arch_64)

  fat_arch:    cputype(4) cpusubtype(4) offset(4) size(4) align(4)
  fat_arch_64: cputype(4) cpusubtype(4) offset(8) size(8) align(4) reserved(4)

Entries are decoded until the first one that does not fully fit in the
buffer; that one is reported as truncated and the rest are not read.
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from ..fields import Buffer, has, read_u32, read_u32_be, read_u64_le
from ..format_detect import FormatKind
from ..report import DecodeReport
from .types import (
    FAT_ARCH_64_SIZE,
    FAT_ARCH_SIZE,
    FAT_HEADER_SIZE,
    FatArch,
    magic_byte_order,
)

logger = logging.getLogger(__name__)

NFAT_ARCH_OFFSET = 4


@dataclass
class FatReport(DecodeReport):
    """Header and architecture list of a Universal binary."""

    is_64: bool = False
    is_little_endian: bool = False
    nfat_arch: int | None = None
    arches: list[FatArch] = field(default_factory=list)

    KIND: ClassVar[FormatKind] = FormatKind.FAT_MACHO


def read_fat_u64(data: Buffer, offset: int, little_endian: bool) -> int:
    """Read a fat_arch_64 offset/size field.

    The little-endian variant is a plain little-endian u64; the big-endian
    variant is composed from two big-endian u32 halves, high half first.
    """
    if little_endian:
        return read_u64_le(data, offset)
    return (read_u32_be(data, offset) << 32) | read_u32_be(data, offset + 4)


def _decode_arch(data: Buffer, off: int, is_le: bool, is_64: bool) -> FatArch:
    cputype = read_u32(data, off, is_le)
    cpusubtype = read_u32(data, off + 4, is_le)
    if is_64:
        arch_offset = read_fat_u64(data, off + 8, is_le)
        size = read_fat_u64(data, off + 16, is_le)
        align = read_u32(data, off + 24, is_le)
    else:
        arch_offset = read_u32(data, off + 8, is_le)
        size = read_u32(data, off + 12, is_le)
        align = read_u32(data, off + 16, is_le)
    return FatArch(
        cputype=cputype,
        cpusubtype=cpusubtype,
        offset=arch_offset,
        size=size,
        align=align,
    )


def decode_fat(data: Buffer) -> FatReport:
    """Decode a fat_header and its architecture entries.

    Args:
        data: Buffer already classified as FAT Mach-O (at least 4 bytes)

    Returns:
        FatReport; partial if the header or an entry was truncated
    """
    magic = read_u32_be(data, 0)
    is_le, is_64 = magic_byte_order(magic)
    report = FatReport(is_64=is_64, is_little_endian=is_le)

    if not has(data, NFAT_ARCH_OFFSET, 4):
        report.add_error("truncated fat header")
        return report
    nfat_arch = read_u32(data, NFAT_ARCH_OFFSET, is_le)
    report.nfat_arch = nfat_arch
    logger.debug("FAT header: %d architecture(s), 64-bit=%s", nfat_arch, is_64)

    stride = FAT_ARCH_64_SIZE if is_64 else FAT_ARCH_SIZE
    for i in range(nfat_arch):
        off = FAT_HEADER_SIZE + i * stride
        if not has(data, off, stride):
            report.add_error(
                f"fat_arch[{i}] truncated: need {stride} bytes at 0x{off:x}, "
                f"buffer is {len(data)} bytes"
            )
            break
        report.arches.append(_decode_arch(data, off, is_le, is_64))

    return report
