"""Output renderers for scan reports: terminal text, JSON, and HTML."""

from __future__ import annotations

from .html import PageData, render_page
from .json import highlight_json, render_report_json
from .text import format_entry_line, render_report_text

__all__ = [
    "PageData",
    "render_page",
    "highlight_json",
    "render_report_json",
    "format_entry_line",
    "render_report_text",
]
