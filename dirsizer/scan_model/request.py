"""Validation of raw ``root``/``sort`` parameters from CLI flags or queries."""

from __future__ import annotations

from pathlib import Path

from .errors import InvalidSortDirection, MissingRootParameter
from .types import ScanRequest, SortOrder


def parse_sort_order(value: str | None) -> SortOrder:
    """Map ``"asc"``/``"desc"`` to ``SortOrder``; anything else is rejected."""
    raw = (value or "").strip()
    try:
        return SortOrder(raw)
    except ValueError as exc:
        raise InvalidSortDirection(raw) from exc


def parse_scan_request(root: str | None, sort: str | None) -> ScanRequest:
    """Validate scan parameters without touching the filesystem.

    The root is checked before the sort direction, so a request missing both
    reports the missing root.
    """
    if root is None or not root.strip():
        raise MissingRootParameter()
    return ScanRequest(root=Path(root), order=parse_sort_order(sort))


__all__ = [
    "parse_sort_order",
    "parse_scan_request",
]
