"""Normalize decoded rows into canonical employee records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from ..mapping.field_mapping import DATE_LABELS
from .dates import format_display_date


@dataclass(slots=True)
class RecordNormalizer:
    """Trims column labels and rewrites date columns as ``YYYY/MM/DD``."""

    date_labels: Tuple[str, ...] = DATE_LABELS

    def normalize_rows(self, rows: Iterable[dict[str, Any]]) -> List[dict[str, Any]]:
        return [self.normalize_row(row) for row in rows]

    def normalize_row(self, row: dict[str, Any]) -> dict[str, Any]:
        normalized: dict[str, Any] = {}
        for key, value in row.items():
            label = str(key).strip()
            if label in self.date_labels:
                normalized[label] = format_display_date(value)
            else:
                normalized[label] = value
        return normalized


__all__ = ["RecordNormalizer"]
