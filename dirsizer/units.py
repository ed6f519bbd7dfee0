"""Human-readable byte sizes on a base-1000 ladder capped at terabytes."""

from __future__ import annotations

import math

UNIT_NAMES: tuple[str, ...] = ("bytes", "kilobytes", "megabytes", "gigabytes", "terabytes")
UNIT_STEP = 1000


def convert_size(size: int | float) -> tuple[float, int]:
    """Scale ``size`` down by 1000 while it is at least 1000.

    Returns ``(value, unit_index)`` with ``value`` rounded half-up to one
    decimal.
    Rounding is applied after scaling, so 999_999 bytes becomes
    ``(1000.0, 1)`` rather than one megabyte.
    """
    value = float(size)
    unit_index = 0
    while value >= UNIT_STEP and unit_index < len(UNIT_NAMES) - 1:
        value /= UNIT_STEP
        unit_index += 1
    return math.floor(value * 10 + 0.5) / 10, unit_index


def format_size(size: int | float) -> str:
    """Format ``size`` as ``"<value> <unit>"``; plain bytes have no decimals."""
    value, unit_index = convert_size(size)
    if unit_index == 0:
        return f"{int(value)} {UNIT_NAMES[0]}"
    return f"{value:.1f} {UNIT_NAMES[unit_index]}"


__all__ = [
    "UNIT_NAMES",
    "UNIT_STEP",
    "convert_size",
    "format_size",
]
