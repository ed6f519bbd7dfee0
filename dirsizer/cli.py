"""Command-line front door for dirsizer.

Lists a directory with per-entry sizes, or starts the web front end with
``--serve``. Scan errors are printed to stdout and the command returns
normally.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

from .config import Settings, load_settings, save_settings
from .log import configure_logging
from .render import highlight_json, render_report_json, render_report_text
from .render.json import DEFAULT_JSON_STYLE
from .scan_model import DirSizerError, parse_scan_request, parse_sort_order, run_scan
from .web import DirSizerServer, StatsReporter


def _port(value: str) -> int:
    """argparse type for TCP port numbers."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 0 <= parsed <= 65535:
        raise argparse.ArgumentTypeError("port must be between 0 and 65535")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirsizer",
        description="List a directory's entries with their sizes, sorted by size.",
    )
    parser.add_argument("--root", default=None, help="Directory to list.")
    parser.add_argument("--sort", default=None, help="Sort direction: asc or desc (default from config).")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON with raw byte sizes.")
    parser.add_argument("--style", default=DEFAULT_JSON_STYLE, help="Pygments style for JSON output on a TTY.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--serve", action="store_true", help="Run the web front end instead of printing.")
    parser.add_argument("--host", default=None, help="Address for --serve (default from config).")
    parser.add_argument("--port", type=_port, default=None, help="Port for --serve (default from config).")
    parser.add_argument("--stats-url", default=None, help="Collector URL that receives scan statistics.")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Store --host/--port/--sort/--stats-url as the new defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def run_listing(root: str | None, sort: str | None, as_json: bool, style: str, no_color: bool) -> None:
    """Scan ``root`` and print the result; errors are printed, not raised."""
    try:
        request = parse_scan_request(root, sort)
        report = run_scan(request)
    except DirSizerError as exc:
        print(f"error: {exc}")
        return

    if not as_json:
        sys.stdout.write(render_report_text(report))
        return
    text = render_report_json(report, indent=2)
    if not no_color and sys.stdout.isatty():
        sys.stdout.write(highlight_json(text, style))
    else:
        sys.stdout.write(text + "\n")


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return ``settings`` with any values given on the command line.

    Raises ``InvalidSortDirection`` for a ``--sort`` value other than asc/desc.
    """
    changes: dict[str, object] = {}
    if args.host:
        changes["host"] = args.host
    if args.port is not None:
        changes["port"] = args.port
    if args.stats_url:
        changes["stats_url"] = args.stats_url
    if args.sort is not None:
        changes["default_sort"] = parse_sort_order(args.sort)
    return dataclasses.replace(settings, **changes)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and either print a listing or serve HTTP."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, no_color=args.no_color)
    settings = load_settings()

    if args.save_config:
        try:
            effective = apply_overrides(settings, args)
        except DirSizerError as exc:
            print(f"error: {exc}")
            return
        print(f"saved settings to {save_settings(effective)}")
        if not args.serve and args.root is None:
            return

    if args.serve:
        server = DirSizerServer(
            args.host or settings.host,
            settings.port if args.port is None else args.port,
            stats_reporter=StatsReporter(args.stats_url or settings.stats_url),
            shutdown_timeout=settings.shutdown_timeout,
        )
        print(f"Open {server.url} in a browser to use dirsizer")
        server.serve_until_interrupted()
        return

    sort = args.sort if args.sort is not None else settings.default_sort.value
    run_listing(args.root, sort, args.json, args.style, args.no_color)


if __name__ == "__main__":
    main()
