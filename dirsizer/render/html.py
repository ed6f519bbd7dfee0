"""HTML page rendering for the browser front end.

The page is a single packaged template filled with ``string.Template``; all
dynamic text is escaped before substitution.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from string import Template

from ..scan_model import Entry, ScanReport, SortOrder
from ..units import format_size

TEMPLATE_PATH = Path(__file__).with_name("templates") / "index.html"


@dataclass(frozen=True)
class PageData:
    """Values shown on the page; every field is optional."""

    entries: tuple[Entry, ...] = ()
    elapsed: str = ""
    error_message: str = ""
    last_path: str = ""
    order: SortOrder = SortOrder.ASC

    @classmethod
    def from_report(cls, report: ScanReport) -> "PageData":
        return cls(
            entries=report.entries,
            elapsed=report.elapsed_label,
            last_path=str(report.root),
            order=report.order,
        )


@lru_cache(maxsize=1)
def _load_template() -> Template:
    return Template(TEMPLATE_PATH.read_text(encoding="utf-8"))


def _entry_row(entry: Entry) -> str:
    kind = "dir" if entry.is_dir else "file"
    label = "folder" if entry.is_dir else "file"
    return (
        f'<tr class="{kind}"><td>{label}</td>'
        f'<td class="name">{html.escape(entry.name)}</td>'
        f'<td class="size">{html.escape(format_size(entry.size))}</td></tr>'
    )


def _table_block(entries: tuple[Entry, ...]) -> str:
    if not entries:
        return ""
    rows = "\n".join(_entry_row(entry) for entry in entries)
    return (
        "<table>\n<thead><tr><th>Type</th><th>Name</th><th>Size</th></tr></thead>\n"
        f"<tbody>\n{rows}\n</tbody>\n</table>"
    )


def render_page(data: PageData) -> str:
    """Return the full HTML document for ``data``."""
    error_block = f'<p class="error">{html.escape(data.error_message)}</p>' if data.error_message else ""
    elapsed_block = f'<p class="elapsed">Elapsed: {html.escape(data.elapsed)}</p>' if data.elapsed else ""
    return _load_template().substitute(
        last_path=html.escape(data.last_path, quote=True),
        asc_selected=" selected" if data.order is SortOrder.ASC else "",
        desc_selected=" selected" if data.order is SortOrder.DESC else "",
        error_block=error_block,
        table_block=_table_block(data.entries),
        elapsed_block=elapsed_block,
    )


__all__ = [
    "TEMPLATE_PATH",
    "PageData",
    "render_page",
]
