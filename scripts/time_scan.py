#!/usr/bin/env python3
"""Measure YCF scanning throughput over a directory of files."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from ycfpy import scan


def _scan_all(sources: list[str], *, label: str, show_progress: bool) -> tuple[float, int, int]:
    """Scan every source once; returns (seconds, span count, diagnostic count)."""
    spans = 0
    diagnostics = 0
    start = time.perf_counter()
    for text in tqdm(sources, desc=label, unit="file", disable=not show_progress):
        scanned = scan(text)
        spans += sum(1 for top in scanned.spans for _ in top.walk())
        diagnostics += len(scanned.diagnostics)
    return time.perf_counter() - start, spans, diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark YCF scanning throughput")
    parser.add_argument("--root", type=Path, required=True, help="Directory holding YCF files")
    parser.add_argument("--glob", default="*.ycf", help="File pattern under --root (default: *.ycf)")
    parser.add_argument("--runs", type=int, default=5, help="Measured passes over the files")
    parser.add_argument("--no-progress", action="store_true", help="Hide the tqdm progress bar")
    args = parser.parse_args()

    if not args.root.is_dir():
        raise SystemExit(f"Invalid --root: {args.root}")
    files = sorted(path for path in args.root.rglob(args.glob) if path.is_file())
    if not files:
        raise SystemExit(f"No {args.glob} files found under {args.root}")

    # Read up front so the timings cover scanning only.
    sources = [path.read_text(encoding="utf-8") for path in files]
    total_chars = sum(len(text) for text in sources)

    timings: list[float] = []
    spans = diagnostics = 0
    for run in range(1, max(args.runs, 1) + 1):
        seconds, spans, diagnostics = _scan_all(
            sources,
            label=f"pass {run}",
            show_progress=not args.no_progress,
        )
        timings.append(seconds)

    median = statistics.median(timings)
    print(f"{len(files)} files, {total_chars} chars, {spans} spans, {diagnostics} diagnostics")
    print(f"median {median:.4f}s over {len(timings)} passes (best {min(timings):.4f}s)")
    print(f"{total_chars / median:.0f} chars/s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
