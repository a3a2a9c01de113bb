"""Flexible date parsing for employee date columns.

Source files carry dates as year-first (``2026/06/29``, ``2026-6-29``) or
day-first (``29/06/2026``) text. Everything is rendered back as
``YYYY/MM/DD``; anything unparseable becomes the ``--`` placeholder.
"""
from __future__ import annotations

import re
from datetime import date
from typing import Optional

MISSING_DATE = "--"

_YEAR_FIRST = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})")
_DAY_FIRST = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{4})")

MIN_YEAR = 1900
MAX_YEAR = 2100


def parse_flexible_date(value: object) -> Optional[date]:
    """Parse a year-first or day-first date string.

    Returns None for non-text input, blanks, the ``--`` placeholder, out of
    range components and dates that do not exist on the calendar.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text or text == MISSING_DATE:
        return None

    match = _YEAR_FIRST.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
    else:
        match = _DAY_FIRST.match(text)
        if not match:
            return None
        day, month, year = (int(part) for part in match.groups())

    if not (MIN_YEAR <= year <= MAX_YEAR and 1 <= month <= 12 and 1 <= day <= 31):
        return None

    try:
        parsed = date(year, month, day)
    except ValueError:
        return None
    if (parsed.year, parsed.month, parsed.day) != (year, month, day):
        return None
    return parsed


def format_display_date(value: object) -> str:
    parsed = parse_flexible_date(value)
    if parsed is None:
        return MISSING_DATE
    return f"{parsed.year:04d}/{parsed.month:02d}/{parsed.day:02d}"


def format_input_date(value: object) -> str:
    """Render as ISO ``YYYY-MM-DD`` for form inputs, or an empty string."""
    parsed = parse_flexible_date(value)
    return parsed.isoformat() if parsed else ""


__all__ = ["MISSING_DATE", "format_display_date", "format_input_date", "parse_flexible_date"]
