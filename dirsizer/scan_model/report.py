"""Full scan pipeline used by every front end: list, size, sort, time."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from .scanner import scan_directory
from .size import compute_size
from .sorting import sort_entries
from .types import Entry, ScanRequest, SortOrder


def format_elapsed(seconds: float) -> str:
    """Short duration label: microseconds, milliseconds, or seconds."""
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.1f}µs"
    if seconds < 1.0:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.3f}s"


@dataclass(frozen=True)
class ScanReport:
    """Sorted entries of one scan plus the totals front ends display."""

    root: Path
    order: SortOrder
    entries: tuple[Entry, ...]
    total_size: int
    elapsed_seconds: float

    @property
    def elapsed_label(self) -> str:
        return format_elapsed(self.elapsed_seconds)

    def to_json(self) -> dict[str, object]:
        return {
            "root": str(self.root),
            "sort": self.order.value,
            "total_size": self.total_size,
            "elapsed": self.elapsed_label,
            "entries": [entry.to_json() for entry in self.entries],
        }


def run_scan(request: ScanRequest) -> ScanReport:
    """Scan ``request.root`` and return its sorted report.

    Raises ``DirectoryReadError`` when the root cannot be listed.
    """
    started = time.perf_counter()
    entries = sort_entries(scan_directory(request.root), request.order)
    total_size = compute_size(request.root)
    return ScanReport(
        root=request.root,
        order=request.order,
        entries=tuple(entries),
        total_size=total_size,
        elapsed_seconds=time.perf_counter() - started,
    )


__all__ = [
    "ScanReport",
    "format_elapsed",
    "run_scan",
]
