"""
Decode reports shared by the PE, Mach-O and FAT decoders.

A report is valid even when decoding stopped early: fields that were never
reached stay None, and the diagnostic that stopped decoding is recorded as
an error. Diagnostics are kept in the order they were produced.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .format_detect import FormatKind


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A single message produced while decoding."""

    severity: Severity
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


@dataclass
class DecodeReport:
    """Base class for all decode reports.

    Subclasses set KIND and add the fields decoded for their format.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    KIND: ClassVar[FormatKind] = FormatKind.UNKNOWN

    @property
    def kind(self) -> FormatKind:
        return self.KIND

    def add_info(self, msg: str) -> None:
        """Add an informational note (nothing is missing that was required)."""
        self.diagnostics.append(Diagnostic(Severity.INFO, msg))

    def add_warning(self, msg: str) -> None:
        """Add a warning (decoding continued)."""
        self.diagnostics.append(Diagnostic(Severity.WARNING, msg))

    def add_error(self, msg: str) -> None:
        """Add an error (decoding stopped here)."""
        self.diagnostics.append(Diagnostic(Severity.ERROR, msg))

    @property
    def infos(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.severity is Severity.INFO]

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[str]:
        return [
            d.message for d in self.diagnostics if d.severity is Severity.WARNING
        ]

    @property
    def partial(self) -> bool:
        """True if a fatal diagnostic stopped decoding."""
        return any(d.is_fatal for d in self.diagnostics)


@dataclass
class UnknownReport(DecodeReport):
    """Report for buffers that match no known magic. No decoder runs."""

    magic: int | None = None  # First 4 bytes big-endian, if present

    KIND: ClassVar[FormatKind] = FormatKind.UNKNOWN
