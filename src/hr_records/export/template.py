"""Sample spreadsheet generation for the import template download."""
from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook

from ..ingestion.normalizer import RecordNormalizer
from ..mapping.field_mapping import DEFAULT_MAPPING, SAMPLE_EMPLOYEES, FieldMapping

TEMPLATE_SHEET = "Employees"
TEMPLATE_FILENAME = "DATABASE_template.xlsx"


def build_template_workbook(
    rows: Iterable[Dict[str, Any]] = SAMPLE_EMPLOYEES,
    mapping: FieldMapping = DEFAULT_MAPPING,
    normalizer: RecordNormalizer | None = None,
) -> Workbook:
    """Build a one-sheet workbook whose header row is the field catalog labels."""
    normalizer = normalizer or RecordNormalizer()
    header: List[str] = mapping.labels()
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = TEMPLATE_SHEET
    sheet.append(header)
    for row in normalizer.normalize_rows(rows):
        sheet.append([row.get(label, "") for label in header])
    return workbook


def write_template(path: str | Path, rows: Iterable[Dict[str, Any]] = SAMPLE_EMPLOYEES) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    build_template_workbook(rows).save(target)
    return target


def template_bytes(rows: Iterable[Dict[str, Any]] = SAMPLE_EMPLOYEES) -> bytes:
    buffer = io.BytesIO()
    build_template_workbook(rows).save(buffer)
    return buffer.getvalue()


__all__ = ["TEMPLATE_FILENAME", "build_template_workbook", "template_bytes", "write_template"]
