"""Domain datatypes for directory scan results."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class SortOrder(str, enum.Enum):
    """Direction used when ordering entries by size."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Entry:
    """One immediate child of a scanned directory with its aggregate size."""

    name: str
    size: int
    is_dir: bool
    path: Path

    def to_json(self) -> dict[str, object]:
        return {
            "name": self.name,
            "size": self.size,
            "is_dir": self.is_dir,
            "path": str(self.path),
        }


@dataclass(frozen=True)
class ScanRequest:
    """Validated scan input: the directory to list and the sort direction."""

    root: Path
    order: SortOrder


__all__ = [
    "SortOrder",
    "Entry",
    "ScanRequest",
]
