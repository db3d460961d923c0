"""
Generic header decoding API.

This module provides format-agnostic entry points. They detect whether a
buffer is PE, Mach-O or FAT Mach-O and dispatch to the matching decoder.

Usage:
    from exe_inspector import decode, decode_file

    report = decode(data)
    report = decode_file(binary_path)
"""

import logging
from pathlib import Path

from .fields import Buffer
from .format_detect import FormatKind, detect, read_magic
from .report import DecodeReport, UnknownReport

logger = logging.getLogger(__name__)


class EmptyBinaryError(ValueError):
    """Raised when decode_file is given a file with no content."""

    pass


def decode(data: Buffer) -> DecodeReport:
    """Detect the container format of a buffer and decode its headers.

    Never raises for malformed input: structural problems are recorded as
    diagnostics on the returned report.

    Args:
        data: Binary data

    Returns:
        PeReport, MachOReport, FatReport, or UnknownReport
    """
    kind = detect(data)
    logger.debug("detected format %s for %d-byte buffer", kind.value, len(data))

    if kind is FormatKind.FAT_MACHO:
        from .macho.fat import decode_fat

        return decode_fat(data)
    elif kind is FormatKind.MACHO:
        from .macho.decoder import decode_macho

        return decode_macho(data)
    elif kind is FormatKind.PE:
        from .coff.decoder import decode_pe

        return decode_pe(data)
    else:
        return UnknownReport(magic=read_magic(data))


def decode_file(path: Path) -> DecodeReport:
    """Read a binary from disk and decode its headers.

    Args:
        path: Path to binary file

    Returns:
        Report for the file's contents

    Raises:
        FileNotFoundError: If the file doesn't exist
        EmptyBinaryError: If the file is empty
    """
    data = Path(path).read_bytes()
    if not data:
        raise EmptyBinaryError(f"File is empty: {path}")
    logger.debug("read %d bytes from %s", len(data), path)
    return decode(data)
