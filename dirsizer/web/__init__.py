"""Browser and JSON front ends served over HTTP."""

from __future__ import annotations

from .app import API_PATH, PAGE_PATH, ScanRequestHandler, status_for_read_error
from .server import DirSizerServer
from .stats import ScanStats, StatsReporter

__all__ = [
    "API_PATH",
    "PAGE_PATH",
    "ScanRequestHandler",
    "status_for_read_error",
    "DirSizerServer",
    "ScanStats",
    "StatsReporter",
]
