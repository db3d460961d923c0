"""
exe-inspector: header decoding for executable containers.

This package identifies whether a byte buffer holds a Windows PE image, a
Mach-O image, or a FAT (Universal) Mach-O, and decodes the fixed-layout
headers of each into a report:

    from exe_inspector import decode, detect, FormatKind

    report = decode(data)
    if report.kind is FormatKind.PE and report.coff is not None:
        print(hex(report.coff.Machine))

For format-specific decoding, use the subpackages directly:

    from exe_inspector.coff import decode_pe
    from exe_inspector.macho import decode_macho, decode_fat
"""

from .coff.decoder import PeReport
from .decode import EmptyBinaryError, decode, decode_file
from .fields import (
    OutOfBounds,
    has,
    read_u16_be,
    read_u16_le,
    read_u32_be,
    read_u32_le,
    read_u64_be,
    read_u64_le,
)
from .format_detect import FormatKind, detect
from .macho.decoder import MachOReport
from .macho.fat import FatReport
from .macho.types import cpu_type_name
from .report import DecodeReport, Diagnostic, Severity, UnknownReport

__all__ = [
    # Decoding
    "decode",
    "decode_file",
    "EmptyBinaryError",
    # Format detection
    "detect",
    "FormatKind",
    # Reports
    "DecodeReport",
    "Diagnostic",
    "Severity",
    "PeReport",
    "MachOReport",
    "FatReport",
    "UnknownReport",
    # Field reader
    "OutOfBounds",
    "has",
    "read_u16_le",
    "read_u16_be",
    "read_u32_le",
    "read_u32_be",
    "read_u64_le",
    "read_u64_be",
    # CPU types
    "cpu_type_name",
]
