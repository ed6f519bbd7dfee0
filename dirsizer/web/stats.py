"""Fire-and-forget reporting of finished scans to a statistics collector."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True)
class ScanStats:
    """Payload posted after a successful page scan."""

    root: str
    size: int
    elapsed_time: str

    def to_json(self) -> dict[str, object]:
        return {
            "root": self.root,
            "size": self.size,
            "elapsedTime": self.elapsed_time,
        }


class StatsReporter:
    """Posts ``ScanStats`` as JSON on a daemon thread.

    Failures are logged and never raised to the caller. With no URL the
    reporter is a no-op.
    """

    def __init__(self, url: str | None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.url = url
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    def send(self, stats: ScanStats) -> bool:
        """Post ``stats`` synchronously; return whether the collector accepted it."""
        if not self.url:
            return False
        try:
            response = requests.post(self.url, json=stats.to_json(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("failed to send scan statistics to %s: %s", self.url, exc)
            return False
        return True

    def report(self, stats: ScanStats) -> threading.Thread | None:
        """Send ``stats`` in the background and return the worker thread."""
        if not self.enabled:
            return None
        worker = threading.Thread(
            target=self.send,
            args=(stats,),
            name="dirsizer-stats",
            daemon=True,
        )
        worker.start()
        return worker


__all__ = [
    "DEFAULT_TIMEOUT",
    "ScanStats",
    "StatsReporter",
]
