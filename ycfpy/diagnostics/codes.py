"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from ycfpy.diagnostics.diagnostic import Diagnostic, Severity
from ycfpy.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None

    def at(self, range: TextRange) -> Diagnostic:
        """Instantiate this spec over `range`."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


SCANNER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_STRING",
    message="String literal runs to the end of the input.",
    hint='Close the string with a double quote (`"`).',
    category="scanner",
)

SCANNER_UNTERMINATED_MAP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_MAP",
    message="Map runs to the end of the input.",
    hint="Close the map with `}`.",
    category="scanner",
)

SCANNER_UNTERMINATED_ARRAY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_ARRAY",
    message="Array runs to the end of the input.",
    hint="Close the array with `]`.",
    category="scanner",
)

SCANNER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_INVALID_ESCAPE",
    message="Invalid escape sequence in string.",
    hint=r"Valid escapes are \n \r \t \0 \\ \", \xHH and \u{H..HHHHHH}.",
    category="scanner",
)

SCANNER_UNRECOGNIZED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNRECOGNIZED_CHARACTER",
    message="Unrecognized characters skipped.",
    category="scanner",
)
