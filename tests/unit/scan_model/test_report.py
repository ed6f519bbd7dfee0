"""Tests for the timed scan pipeline shared by all front ends."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dirsizer.scan_model import DirectoryReadError, ScanRequest, SortOrder, compute_size, format_elapsed, run_scan


class RunScanTests(unittest.TestCase):
    def test_report_holds_sorted_entries_and_total(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "small").write_bytes(b"x" * 1)
            (root / "large").write_bytes(b"x" * 300)
            sub = root / "sub"
            sub.mkdir()
            (sub / "mid").write_bytes(b"x" * 20)

            report = run_scan(ScanRequest(root=root, order=SortOrder.DESC))

            self.assertEqual([entry.name for entry in report.entries], ["large", "sub", "small"])
            self.assertEqual(report.total_size, compute_size(root))
            self.assertGreaterEqual(report.elapsed_seconds, 0.0)

            payload = report.to_json()
            self.assertEqual(payload["root"], str(root))
            self.assertEqual(payload["sort"], "desc")
            self.assertEqual(payload["entries"][0], {"name": "large", "size": 300, "is_dir": False, "path": str(root / "large")})

    def test_unreadable_root_propagates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(DirectoryReadError):
                run_scan(ScanRequest(root=Path(tmp) / "missing", order=SortOrder.ASC))


class FormatElapsedTests(unittest.TestCase):
    def test_scales_label_by_magnitude(self) -> None:
        self.assertEqual(format_elapsed(0.0000125), "12.5µs")
        self.assertEqual(format_elapsed(0.0123), "12.3ms")
        self.assertEqual(format_elapsed(1.2044), "1.204s")


if __name__ == "__main__":
    unittest.main()
