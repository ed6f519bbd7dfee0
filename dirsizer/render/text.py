"""Plain-text listing used by the command-line front end."""

from __future__ import annotations

from ..scan_model import Entry, ScanReport
from ..units import format_size


def format_entry_line(entry: Entry) -> str:
    """``folder [name] <size>`` for directories, ``file <name> <size>`` otherwise."""
    if entry.is_dir:
        return f"folder [{entry.name}] {format_size(entry.size)}"
    return f"file {entry.name} {format_size(entry.size)}"


def render_report_text(report: ScanReport) -> str:
    lines = [format_entry_line(entry) for entry in report.entries]
    lines.append(f"elapsed: {report.elapsed_label}")
    return "\n".join(lines) + "\n"


__all__ = [
    "format_entry_line",
    "render_report_text",
]
