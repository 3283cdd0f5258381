"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from ycfpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured, advisory note attached to a range of the scanned text."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
