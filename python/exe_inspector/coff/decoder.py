"""
PE header decoding.

Decoding walks a fixed chain of stages, each gated on the previous one:

    DOS header -> PE signature -> COFF header -> optional header magic

The first stage that runs out of bytes (or finds the wrong signature)
records an error and ends decoding. Fields read before that point are
kept in the report; fields after it stay None.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from ..fields import Buffer, has, read_u16_le, read_u32_le
from ..format_detect import FormatKind
from ..report import DecodeReport
from .types import (
    COFF_HEADER_SIZE,
    OPTIONAL_MAGIC_SIZE,
    PE_SIGNATURE,
    PE_SIGNATURE_OFFSET_LOCATION,
    CoffHeader,
    optional_magic_name,
)

logger = logging.getLogger(__name__)


@dataclass
class PeReport(DecodeReport):
    """Fields decoded from a PE image."""

    e_lfanew: int | None = None
    coff: CoffHeader | None = None
    optional_magic: int | None = None  # Absent when no bytes follow the COFF header

    KIND: ClassVar[FormatKind] = FormatKind.PE

    @property
    def optional_kind(self) -> str | None:
        """Optional header kind (PE32, PE32+ or unknown); None if not read."""
        if self.optional_magic is None:
            return None
        return optional_magic_name(self.optional_magic)


def decode_pe(data: Buffer) -> PeReport:
    """Decode the DOS, COFF and optional-header magic of a PE image.

    Args:
        data: Buffer already classified as PE (starts with "MZ")

    Returns:
        PeReport; partial (with an error diagnostic) if a stage failed
    """
    report = PeReport()

    # Stage 1: DOS header field pointing at the PE signature
    if not has(data, PE_SIGNATURE_OFFSET_LOCATION, 4):
        report.add_error("too small for DOS header")
        return report
    e_lfanew = read_u32_le(data, PE_SIGNATURE_OFFSET_LOCATION)
    report.e_lfanew = e_lfanew
    logger.debug("e_lfanew = 0x%x", e_lfanew)

    # Stage 2: PE signature
    if not has(data, e_lfanew, len(PE_SIGNATURE)):
        report.add_error(f"invalid e_lfanew 0x{e_lfanew:x} (buffer is {len(data)} bytes)")
        return report
    if bytes(data[e_lfanew : e_lfanew + len(PE_SIGNATURE)]) != PE_SIGNATURE:
        report.add_error("MZ found but PE signature missing at e_lfanew")
        return report

    # Stage 3: COFF file header
    coff_offset = e_lfanew + len(PE_SIGNATURE)
    if not has(data, coff_offset, COFF_HEADER_SIZE):
        report.add_error(f"incomplete COFF header at 0x{coff_offset:x}")
        return report
    report.coff = CoffHeader.from_bytes(data, coff_offset)
    logger.debug(
        "COFF header: machine=0x%x sections=%d",
        report.coff.Machine,
        report.coff.NumberOfSections,
    )

    # Stage 4: optional header magic (absence is not an error)
    opt_offset = coff_offset + COFF_HEADER_SIZE
    if not has(data, opt_offset, OPTIONAL_MAGIC_SIZE):
        report.add_info(f"no optional header magic at 0x{opt_offset:x}")
        return report
    report.optional_magic = read_u16_le(data, opt_offset)
    logger.debug("optional header magic = 0x%x", report.optional_magic)

    return report
