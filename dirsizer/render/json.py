"""JSON encoding of scan reports, with optional terminal highlighting."""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.util import ClassNotFound

from ..scan_model import ScanReport

DEFAULT_JSON_STYLE = "monokai"


def render_report_json(report: ScanReport, indent: int | None = None) -> str:
    """Serialize ``report`` with raw integer byte sizes."""
    return json.dumps(report.to_json(), indent=indent, ensure_ascii=False)


def highlight_json(text: str, style: str = DEFAULT_JSON_STYLE) -> str:
    """Colorize JSON text for a 256-color terminal.

    Unknown pygments style names fall back to ``DEFAULT_JSON_STYLE``.
    """
    try:
        formatter = Terminal256Formatter(style=style)
    except ClassNotFound:
        formatter = Terminal256Formatter(style=DEFAULT_JSON_STYLE)
    return highlight(text, JsonLexer(), formatter)


__all__ = [
    "DEFAULT_JSON_STYLE",
    "render_report_json",
    "highlight_json",
]
