"""
Single-architecture Mach-O header decoding.

Byte order and word size are taken from the magic alone. All six header
fields after the magic are u32 at fixed offsets; a field that does not
fit in the buffer decodes as 0 instead of stopping the decoder.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from ..fields import Buffer, OutOfBounds, read_u32, read_u32_be
from ..format_detect import FormatKind
from ..report import DecodeReport
from .types import MachHeader, magic_byte_order

logger = logging.getLogger(__name__)


@dataclass
class MachOReport(DecodeReport):
    """Fields decoded from a Mach-O header."""

    header: MachHeader | None = None
    is_64: bool = False
    is_little_endian: bool = False

    KIND: ClassVar[FormatKind] = FormatKind.MACHO


def decode_macho(data: Buffer) -> MachOReport:
    """Decode a mach_header or mach_header_64.

    Args:
        data: Buffer already classified as Mach-O (at least 4 bytes)

    Returns:
        MachOReport with a warning listing any fields that defaulted to 0
    """
    magic = read_u32_be(data, 0)
    is_le, is_64 = magic_byte_order(magic)
    report = MachOReport(is_64=is_64, is_little_endian=is_le)
    logger.debug(
        "Mach-O magic 0x%08x (%s, %s-endian)",
        magic,
        "64-bit" if is_64 else "32-bit",
        "little" if is_le else "big",
    )

    values: dict[str, int] = {}
    missing: list[str] = []
    for name, offset in MachHeader.FIELD_OFFSETS.items():
        try:
            values[name] = read_u32(data, offset, is_le)
        except OutOfBounds:
            values[name] = 0
            missing.append(name)

    if missing:
        report.add_warning(
            f"truncated mach header ({len(data)} bytes): "
            f"{', '.join(missing)} reported as 0"
        )

    report.header = MachHeader(magic=magic, **values)
    return report
