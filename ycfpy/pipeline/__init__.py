"""Shared scan carriers."""

from ycfpy.pipeline.result import YcfScanResult

__all__ = [
    "YcfScanResult",
]
