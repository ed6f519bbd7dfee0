"""HTTP routing for the HTML page, the JSON API, and packaged static files."""

from __future__ import annotations

import errno
import logging
import mimetypes
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

from ..render import PageData, render_page, render_report_json
from ..scan_model import (
    DirectoryReadError,
    RequestValidationError,
    format_elapsed,
    parse_scan_request,
    run_scan,
)
from .stats import ScanStats, StatsReporter

logger = logging.getLogger(__name__)

PAGE_PATH = "/"
API_PATH = "/api/entries"
STATIC_PREFIX = "/static/"
STATIC_DIR = Path(__file__).with_name("static")


def _query_value(query: dict[str, list[str]], key: str) -> str | None:
    values = query.get(key)
    return values[0] if values else None


def status_for_read_error(error: DirectoryReadError) -> HTTPStatus:
    """Map the ``OSError`` behind an unreadable root to an HTTP status."""
    reason = error.reason
    if isinstance(reason, FileNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(reason, PermissionError):
        return HTTPStatus.FORBIDDEN
    if isinstance(reason, NotADirectoryError) or reason.errno == errno.ENOTDIR:
        return HTTPStatus.BAD_REQUEST
    return HTTPStatus.INTERNAL_SERVER_ERROR


class ScanRequestHandler(BaseHTTPRequestHandler):
    """Request handler bound to a ``StatsReporter`` through the server object."""

    server_version = "dirsizer"

    @property
    def stats_reporter(self) -> StatsReporter:
        return getattr(self.server, "stats_reporter", None) or StatsReporter(None)

    def log_message(self, format: str, *args: object) -> None:
        logger.info("%s %s", self.address_string(), format % args)

    def _send(self, status: HTTPStatus, body: str | bytes, content_type: str) -> None:
        payload = body.encode("utf-8") if isinstance(body, str) else body
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def _send_text(self, status: HTTPStatus, message: str) -> None:
        self._send(status, message + "\n", "text/plain; charset=utf-8")

    def _send_page(self, data: PageData, status: HTTPStatus = HTTPStatus.OK) -> None:
        self._send(status, render_page(data), "text/html; charset=utf-8")

    def do_GET(self) -> None:
        url = urlsplit(self.path)
        query = parse_qs(url.query)
        if url.path == PAGE_PATH:
            self.handle_page(query)
        elif url.path == API_PATH:
            self.handle_api(query)
        elif url.path.startswith(STATIC_PREFIX):
            self.handle_static(url.path[len(STATIC_PREFIX):])
        else:
            self._send_text(HTTPStatus.NOT_FOUND, "not found")

    def handle_page(self, query: dict[str, list[str]]) -> None:
        started = time.perf_counter()
        raw_root = _query_value(query, "root")
        raw_sort = _query_value(query, "sort")
        if raw_root is None and raw_sort is None:
            self._send_page(PageData())
            return

        try:
            request = parse_scan_request(raw_root, raw_sort)
        except RequestValidationError as exc:
            self._send_page(PageData(error_message=str(exc), last_path=raw_root or ""), HTTPStatus.BAD_REQUEST)
            return

        try:
            report = run_scan(request)
        except DirectoryReadError as exc:
            self._send_page(
                PageData(
                    elapsed=format_elapsed(time.perf_counter() - started),
                    error_message=f"Error reading directory: {exc}",
                    last_path=str(request.root),
                    order=request.order,
                )
            )
            return

        self.stats_reporter.report(
            ScanStats(root=str(report.root), size=report.total_size, elapsed_time=report.elapsed_label)
        )
        self._send_page(PageData.from_report(report))

    def handle_api(self, query: dict[str, list[str]]) -> None:
        try:
            request = parse_scan_request(_query_value(query, "root"), _query_value(query, "sort"))
            report = run_scan(request)
        except RequestValidationError as exc:
            self._send_text(HTTPStatus.BAD_REQUEST, str(exc))
            return
        except DirectoryReadError as exc:
            self._send_text(status_for_read_error(exc), f"error reading directory: {exc}")
            return
        self._send(HTTPStatus.OK, render_report_json(report), "application/json")

    def handle_static(self, name: str) -> None:
        target = (STATIC_DIR / name).resolve()
        if not target.is_relative_to(STATIC_DIR.resolve()) or not target.is_file():
            self._send_text(HTTPStatus.NOT_FOUND, "not found")
            return
        content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
        self._send(HTTPStatus.OK, target.read_bytes(), content_type)


__all__ = [
    "PAGE_PATH",
    "API_PATH",
    "STATIC_PREFIX",
    "ScanRequestHandler",
    "status_for_read_error",
]
