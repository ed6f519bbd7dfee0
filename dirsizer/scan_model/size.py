"""Recursive size aggregation for a single path."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def compute_size(path: Path) -> int:
    """Return the total byte count of everything reachable from ``path``.

    Symlinks are not followed. Every regular file and every directory below
    ``path`` contributes its ``lstat`` size; the metadata size of ``path``
    itself is left out so a child directory is not counted twice when its
    parent sums the children. Any ``OSError`` during the walk collapses the
    whole result to ``0``.
    """
    try:
        root_stat = os.lstat(path)
        if not stat.S_ISDIR(root_stat.st_mode):
            return int(root_stat.st_size)
        return _directory_contents_size(path)
    except OSError as exc:
        logger.debug("size walk aborted for %s: %s", path, exc)
        return 0


def _directory_contents_size(root: Path) -> int:
    total = 0
    pending: list[str] = [os.fspath(root)]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as entries:
            for child in entries:
                child_stat = child.stat(follow_symlinks=False)
                total += int(child_stat.st_size)
                if stat.S_ISDIR(child_stat.st_mode):
                    pending.append(child.path)
    return total


__all__ = ["compute_size"]
