"""Diagnostics."""

from ycfpy.diagnostics.codes import (
    SCANNER_INVALID_ESCAPE,
    SCANNER_UNRECOGNIZED_CHARACTER,
    SCANNER_UNTERMINATED_ARRAY,
    SCANNER_UNTERMINATED_MAP,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from ycfpy.diagnostics.diagnostic import Diagnostic, Severity
from ycfpy.diagnostics.report import has_errors

__all__ = [
    "SCANNER_INVALID_ESCAPE",
    "SCANNER_UNRECOGNIZED_CHARACTER",
    "SCANNER_UNTERMINATED_ARRAY",
    "SCANNER_UNTERMINATED_MAP",
    "SCANNER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
