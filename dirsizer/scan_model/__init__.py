"""Directory scan model: entry types, size aggregation, scanning, ordering.

This package holds the non-UI core shared by the CLI and the web front ends:
- ``Entry``/``SortOrder``/``ScanRequest`` datatypes
- recursive size aggregation with zero collapse on walk errors
- concurrent listing of a directory's immediate children
- validation of raw parameters and the timed scan pipeline
"""

from __future__ import annotations

from .errors import (
    DirectoryReadError,
    DirSizerError,
    InvalidSortDirection,
    MissingRootParameter,
    RequestValidationError,
)
from .report import ScanReport, format_elapsed, run_scan
from .request import parse_scan_request, parse_sort_order
from .scanner import SCAN_WORKERS, list_children, scan_directory
from .size import compute_size
from .sorting import sort_entries
from .types import Entry, ScanRequest, SortOrder

__all__ = [
    "Entry",
    "ScanRequest",
    "SortOrder",
    "DirSizerError",
    "RequestValidationError",
    "MissingRootParameter",
    "InvalidSortDirection",
    "DirectoryReadError",
    "compute_size",
    "SCAN_WORKERS",
    "list_children",
    "scan_directory",
    "sort_entries",
    "parse_scan_request",
    "parse_sort_order",
    "ScanReport",
    "format_elapsed",
    "run_scan",
]
