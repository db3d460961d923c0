#!/usr/bin/env python3
"""
Executable header inspection CLI tool.

Prints the container type and fixed header fields of a PE, Mach-O or FAT
Mach-O file.

Usage:
    python -m exe_inspector.tools.inspect_exe <binary> [--verbose]

Exit status:
    0  headers decoded (possibly partially, see the printed diagnostics)
    1  usage error
    2  file missing, unreadable, or empty
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from exe_inspector import (
    DecodeReport,
    FatReport,
    MachOReport,
    PeReport,
    UnknownReport,
    decode,
)

logger = logging.getLogger(__name__)


def _render_pe(report: PeReport, out: TextIO) -> None:
    print("type: PE", file=out)
    coff = report.coff
    if coff is None:
        return
    print(f"machine: 0x{coff.Machine:x} ({coff.machine_name})", file=out)
    print(f"sections: {coff.NumberOfSections}", file=out)
    print(f"timestamp: {coff.TimeDateStamp} (unix epoch)", file=out)
    print(f"opt_hdr_size: {coff.SizeOfOptionalHeader}", file=out)
    print(f"characteristics: 0x{coff.Characteristics:x}", file=out)
    if report.optional_magic is not None:
        print(
            f"opt_magic: 0x{report.optional_magic:x} ({report.optional_kind})",
            file=out,
        )


def _render_macho(report: MachOReport, out: TextIO) -> None:
    bits = "64" if report.is_64 else "32"
    order = "little" if report.is_little_endian else "big"
    print(f"type: Mach-O {bits} ({order})", file=out)
    header = report.header
    if header is None:
        return
    print(f"cputype: {header.cpu_name} (0x{header.cputype:x})", file=out)
    print(f"filetype: {header.filetype}  (1=obj,2=exec,6=dylib,7=bundle)", file=out)
    print(f"ncmds: {header.ncmds}  sizeofcmds: {header.sizeofcmds}", file=out)
    print(f"flags: 0x{header.flags:x}", file=out)


def _render_fat(report: FatReport, out: TextIO) -> None:
    suffix = ", 64" if report.is_64 else ""
    print(f"type: Mach-O FAT (Universal{suffix})", file=out)
    if report.nfat_arch is None:
        return
    print(f"architectures: {report.nfat_arch}", file=out)
    for i, arch in enumerate(report.arches):
        print(
            f"  [{i}] {arch.cpu_name} (cputype=0x{arch.cputype:x}, "
            f"cpusub=0x{arch.cpusubtype:x})",
            file=out,
        )
        print(
            f"       offset={arch.offset}  size={arch.size}  align={arch.align}",
            file=out,
        )


def render_report(
    report: DecodeReport, out: TextIO | None = None, verbose: bool = False
) -> None:
    """Print a decode report as text.

    Args:
        report: Report returned by decode()
        out: Stream to write to (stdout if None)
        verbose: Also print the leading magic of unrecognized files
    """
    if out is None:
        out = sys.stdout

    if isinstance(report, PeReport):
        _render_pe(report, out)
    elif isinstance(report, MachOReport):
        _render_macho(report, out)
    elif isinstance(report, FatReport):
        _render_fat(report, out)
    elif isinstance(report, UnknownReport):
        print("type: UNKNOWN", file=out)
        if verbose and report.magic is not None:
            print(f"magic(first4): 0x{report.magic:x}", file=out)

    for diag in report.diagnostics:
        print(diag, file=out)


def inspect_binary(binary: Path, verbose: bool = False) -> int:
    """Decode a binary and print its report.

    Args:
        binary: Path to binary
        verbose: Whether to print debug details

    Returns:
        Process exit status
    """
    try:
        data = binary.read_bytes()
    except OSError as e:
        print(f"err: couldn't read file or empty: {binary} ({e})", file=sys.stderr)
        return 2
    if not data:
        print(f"err: couldn't read file or empty: {binary}", file=sys.stderr)
        return 2

    # st_size is 0 for procfs files and pipes, so count what was read
    if verbose:
        print(f"debug: read {len(data)} bytes")
    report = decode(data)
    print(f"file: {binary}")
    render_report(report, sys.stdout, verbose)
    return 0


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def main(argv: list[str] | None = None) -> int:
    parser = _ArgumentParser(
        description="Print the container type and header fields of a PE or Mach-O binary"
    )
    parser.add_argument(
        "binary", type=Path, nargs="?", help="Path to the binary to inspect"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output",
    )
    # Trailing arguments are ignored
    args, extra = parser.parse_known_args(argv)

    if args.binary is None:
        parser.print_usage(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if extra:
        logger.warning("Ignoring extra arguments: %s", " ".join(extra))

    return inspect_binary(args.binary, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
