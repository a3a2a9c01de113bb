"""Shared test data builders."""
from __future__ import annotations

import io
from typing import Any, Iterable

from openpyxl import Workbook

from hr_records.mapping.field_mapping import DEFAULT_MAPPING

LABEL = DEFAULT_MAPPING.label_for


def make_xlsx(rows: Iterable[Iterable[Any]], extra_sheet: Iterable[Iterable[Any]] | None = None) -> bytes:
    """Build an in-memory workbook; the first sheet holds ``rows``."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Employees"
    for row in rows:
        sheet.append(list(row))
    if extra_sheet is not None:
        other = workbook.create_sheet("Other")
        for row in extra_sheet:
            other.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def employee_row(number: str, **overrides: str) -> dict[str, str]:
    row = {
        LABEL("employee_number"): number,
        LABEL("arabic_name"): "حسن فلاح",
        LABEL("english_name"): "HASSAN FALAH",
        LABEL("civil_id"): "293293293293",
        LABEL("civil_id_expiry"): "2026/06/29",
        LABEL("nationality"): "كويتي",
        LABEL("contract_date"): "1993/07/09",
        LABEL("contract_status"): "نشط",
        LABEL("job_title"): "مدير عام",
        LABEL("work_schedule"): "دوامين",
        LABEL("current_salary"): "800",
    }
    for field_name, value in overrides.items():
        row[LABEL(field_name)] = value
    return row
