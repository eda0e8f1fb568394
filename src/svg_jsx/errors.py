"""Error types and diagnostics for SVG to JSX conversion."""

from dataclasses import dataclass
from typing import Literal

DiagnosticKind = Literal[
    "NoSvgRoot",
    "MissingSvgRoot",
    "OptimizerFailure",
    "FormatterFailure",
]


@dataclass(frozen=True)
class Diagnostic:
    """A reported problem: its kind plus a human-readable message."""

    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class ConversionError(Exception):
    """Base class for all conversion errors."""

    kind: DiagnosticKind

    def to_diagnostic(self) -> Diagnostic:
        """Convert the error into a Diagnostic."""
        return Diagnostic(kind=self.kind, message=str(self))


class ParseError(ConversionError):
    """Input contains no well-formed <svg>...</svg> span."""

    kind: DiagnosticKind = "NoSvgRoot"


class GenerationError(ConversionError):
    """Tree handed to the generator has no svg root."""

    kind: DiagnosticKind = "MissingSvgRoot"


class OptimizerError(ConversionError):
    """The external SVG optimizer failed. Always recovered."""

    kind: DiagnosticKind = "OptimizerFailure"


class FormatterError(ConversionError):
    """The external source formatter failed. Always recovered."""

    kind: DiagnosticKind = "FormatterFailure"
