"""CLI argument handling and output tests.

Verifies listing output, JSON mode, config defaults, and that scan errors
are printed instead of raised.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from dirsizer import cli, config
from dirsizer.config import Settings
from dirsizer.scan_model import SortOrder


def _run(argv: list[str], settings: Settings | None = None) -> str:
    stdout = io.StringIO()
    with mock.patch("dirsizer.cli.load_settings", return_value=settings or Settings()), mock.patch(
        "dirsizer.cli.configure_logging"
    ), redirect_stdout(stdout):
        cli.main(argv)
    return stdout.getvalue()


class CliListingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        (self.root / "tiny.txt").write_bytes(b"x" * 3)
        sub = self.root / "media"
        sub.mkdir()
        (sub / "clip.bin").write_bytes(b"x" * 1500)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_prints_entries_sorted_ascending(self) -> None:
        output = _run(["--root", str(self.root), "--sort", "asc"])
        lines = output.splitlines()
        self.assertEqual(lines[0], "file tiny.txt 3 bytes")
        self.assertEqual(lines[1], "folder [media] 1.5 kilobytes")
        self.assertTrue(lines[2].startswith("elapsed: "))

    def test_sort_defaults_to_config_value(self) -> None:
        output = _run(["--root", str(self.root)], settings=Settings(default_sort=SortOrder.DESC))
        self.assertTrue(output.startswith("folder [media]"))

    def test_json_mode_prints_raw_sizes(self) -> None:
        output = _run(["--root", str(self.root), "--sort", "desc", "--json"])
        payload = json.loads(output)
        self.assertEqual([entry["size"] for entry in payload["entries"]], [1500, 3])
        self.assertEqual(payload["sort"], "desc")

    def test_missing_root_prints_error_without_exit(self) -> None:
        with mock.patch("dirsizer.cli.run_scan") as run_scan:
            output = _run(["--sort", "asc"])
        run_scan.assert_not_called()
        self.assertIn("error: root directory is not specified", output)

    def test_invalid_sort_prints_error_before_scanning(self) -> None:
        with mock.patch("dirsizer.cli.run_scan") as run_scan:
            output = _run(["--root", str(self.root), "--sort", "sideways"])
        run_scan.assert_not_called()
        self.assertIn("'sideways'", output)

    def test_unreadable_root_prints_error(self) -> None:
        output = _run(["--root", str(self.root / "missing"), "--sort", "asc"])
        self.assertTrue(output.startswith("error: "))


class CliServeTests(unittest.TestCase):
    def test_serve_builds_server_from_flags_and_config(self) -> None:
        settings = Settings(host="0.0.0.0", port=9100, stats_url="http://collector/stat", shutdown_timeout=3.0)
        with mock.patch("dirsizer.cli.DirSizerServer") as server_cls:
            server_cls.return_value.url = "http://0.0.0.0:9200/"
            output = _run(["--serve", "--port", "9200"], settings=settings)

        server_cls.assert_called_once()
        host, port = server_cls.call_args.args
        self.assertEqual((host, port), ("0.0.0.0", 9200))
        self.assertEqual(server_cls.call_args.kwargs["shutdown_timeout"], 3.0)
        self.assertEqual(server_cls.call_args.kwargs["stats_reporter"].url, "http://collector/stat")
        server_cls.return_value.serve_until_interrupted.assert_called_once_with()
        self.assertIn("http://0.0.0.0:9200/", output)

    def test_invalid_port_is_rejected_by_parser(self) -> None:
        with self.assertRaises(SystemExit), mock.patch("sys.stderr", new_callable=io.StringIO):
            _run(["--serve", "--port", "70000"])


class CliSaveConfigTests(unittest.TestCase):
    def test_save_config_persists_effective_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "dirsizer" / "config.json"
            with mock.patch("dirsizer.config.CONFIG_PATH", config_path):
                output = _run(
                    ["--save-config", "--port", "9300", "--sort", "desc", "--stats-url", "http://collector/stat"],
                    settings=Settings(host="0.0.0.0", shutdown_timeout=2.0),
                )
                saved = config.load_settings()

        self.assertEqual(output.splitlines(), [f"saved settings to {config_path}"])
        self.assertEqual(
            saved,
            Settings(
                host="0.0.0.0",
                port=9300,
                default_sort=SortOrder.DESC,
                stats_url="http://collector/stat",
                shutdown_timeout=2.0,
            ),
        )

    def test_save_config_rejects_invalid_sort_without_writing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirsizer.config.CONFIG_PATH", config_path):
                output = _run(["--save-config", "--sort", "sideways"])
            self.assertFalse(config_path.exists())
        self.assertIn("'sideways'", output)

    def test_save_config_then_lists_when_root_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "scan"
            root.mkdir()
            (root / "one.txt").write_bytes(b"x")
            with mock.patch("dirsizer.config.CONFIG_PATH", Path(tmp) / "config.json"):
                output = _run(["--save-config", "--root", str(root), "--sort", "asc"])

        lines = output.splitlines()
        self.assertTrue(lines[0].startswith("saved settings to "))
        self.assertEqual(lines[1], "file one.txt 1 bytes")


if __name__ == "__main__":
    unittest.main()
