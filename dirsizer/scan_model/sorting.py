"""Size ordering for scan results."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Entry, SortOrder


def sort_entries(entries: Iterable[Entry], order: SortOrder) -> list[Entry]:
    """Return ``entries`` ordered by ``size`` only; ties keep no guaranteed order."""
    return sorted(entries, key=lambda entry: entry.size, reverse=order is SortOrder.DESC)


__all__ = ["sort_entries"]
