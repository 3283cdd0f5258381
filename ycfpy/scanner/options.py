"""Scanner modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ScanMode(StrEnum):
    """Output profile."""

    STANDARD = "standard"
    VERBOSE = "verbose"


@dataclass(frozen=True, slots=True)
class ScannerOptions:
    """Flags controlling what the scanner emits besides classified spans."""

    mode: ScanMode = ScanMode.STANDARD
    # Emit `unclassified` spans for skipped text so spans tile the whole input.
    emit_unclassified: bool = False
    report_unrecognized: bool = True

    @staticmethod
    def for_mode(mode: ScanMode) -> "ScannerOptions":
        if mode == ScanMode.VERBOSE:
            return ScannerOptions(
                mode=mode,
                emit_unclassified=True,
                report_unrecognized=True,
            )

        return ScannerOptions(
            mode=mode,
            emit_unclassified=False,
            report_unrecognized=True,
        )
