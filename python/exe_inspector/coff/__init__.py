"""
PE/COFF header decoding package for exe-inspector.

This package provides:
- types: PE/COFF constants and the CoffHeader struct
- decoder: decode_pe and its PeReport
"""

from .decoder import PeReport, decode_pe
from .types import (
    # Structs
    CoffHeader,
    # Constants
    PE_SIGNATURE,
    PE_SIGNATURE_OFFSET_LOCATION,
    COFF_HEADER_SIZE,
    # Machine types
    IMAGE_FILE_MACHINE_I386,
    IMAGE_FILE_MACHINE_AMD64,
    IMAGE_FILE_MACHINE_ARM64,
    # Optional header magic
    IMAGE_NT_OPTIONAL_HDR32_MAGIC,
    IMAGE_NT_OPTIONAL_HDR64_MAGIC,
    # File characteristics
    IMAGE_FILE_DLL,
    IMAGE_FILE_EXECUTABLE_IMAGE,
    # Helper functions
    optional_magic_name,
)

__all__ = [
    # Decoding
    "PeReport",
    "decode_pe",
    # Structs
    "CoffHeader",
    # Constants
    "PE_SIGNATURE",
    "PE_SIGNATURE_OFFSET_LOCATION",
    "COFF_HEADER_SIZE",
    # Machine types
    "IMAGE_FILE_MACHINE_I386",
    "IMAGE_FILE_MACHINE_AMD64",
    "IMAGE_FILE_MACHINE_ARM64",
    # Optional header magic
    "IMAGE_NT_OPTIONAL_HDR32_MAGIC",
    "IMAGE_NT_OPTIONAL_HDR64_MAGIC",
    # File characteristics
    "IMAGE_FILE_DLL",
    "IMAGE_FILE_EXECUTABLE_IMAGE",
    # Helper functions
    "optional_magic_name",
]
