#!/usr/bin/env python
"""Print the classified span tree of a YCF file."""

import argparse
from pathlib import Path

from ycfpy import ScanMode, scan_result
from ycfpy.scanner import dump_spans


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump YCF spans for debugging")
    parser.add_argument("path", type=Path, help="YCF file to scan")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also emit unclassified spans for skipped text",
    )
    parser.add_argument("--outline", action="store_true", help="Print the key-path outline instead")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    result = scan_result(text, mode=ScanMode.VERBOSE if args.verbose else ScanMode.STANDARD)

    if args.outline:
        index = result.line_index()
        for entry in result.outline():
            for item in entry.walk():
                position = index.line_col(item.key.range.start)
                value = item.value.category.value if item.value is not None else "-"
                print(f"{position.line + 1}:{position.col + 1} {item.dotted} ({value})")
        return 0

    dump_spans(result.spans, text, result.diagnostics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
