"""Numeric parsing and display helpers for observation values."""

from __future__ import annotations

import math
from datetime import date
from typing import Any

__all__ = ["to_date", "to_float", "format_value"]


def to_float(value: Any) -> float | None:
    """Parse *value* as a finite float, returning ``None`` when absent.

    Booleans, blank strings, non-numeric text, NaN and infinities all read as
    absent so that threshold checks on them never fire.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def to_date(value: Any) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` date, returning ``None`` when absent or invalid."""

    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def format_value(value: float) -> str:
    """Render a parsed value without a trailing ``.0`` (5.0 -> ``5``)."""

    return f"{value:g}"
