"""Concurrent listing of one directory with per-child size aggregation."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from .errors import DirectoryReadError
from .size import compute_size
from .types import Entry

logger = logging.getLogger(__name__)

SCAN_WORKERS = min(32, (os.cpu_count() or 1) + 4)


def _size_child(child: os.DirEntry[str]) -> Entry | None:
    """Build the entry for one listed child, or ``None`` if its stat fails."""
    path = Path(child.path)
    try:
        is_dir = child.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False

    if is_dir:
        size = compute_size(path)
    else:
        try:
            size = int(child.stat(follow_symlinks=False).st_size)
        except OSError as exc:
            logger.debug("dropping %s: %s", path, exc)
            return None
    return Entry(name=child.name, size=size, is_dir=is_dir, path=path)


def list_children(root: Path) -> list[os.DirEntry[str]]:
    """Return the immediate children of ``root`` or raise ``DirectoryReadError``."""
    try:
        with os.scandir(root) as entries:
            return list(entries)
    except OSError as exc:
        raise DirectoryReadError(root, exc) from exc


def scan_directory(root: Path) -> list[Entry]:
    """Size every immediate child of ``root`` on a bounded thread pool.

    Each child yields its own future; the call returns once all of them have
    finished. Order of the returned entries is unspecified. Children whose
    file metadata cannot be read are omitted.
    """
    root = Path(root)
    children = list_children(root)
    if not children:
        return []

    with ThreadPoolExecutor(
        max_workers=min(SCAN_WORKERS, len(children)),
        thread_name_prefix="dirsizer-scan",
    ) as executor:
        futures: list[Future[Entry | None]] = [executor.submit(_size_child, child) for child in children]
        results = [future.result() for future in futures]

    entries = [entry for entry in results if entry is not None]
    logger.debug("scanned %s: %d of %d children sized", root, len(entries), len(children))
    return entries


__all__ = [
    "SCAN_WORKERS",
    "list_children",
    "scan_directory",
]
