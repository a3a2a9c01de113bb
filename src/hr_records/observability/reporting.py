"""Utilities to persist import reports."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..models import ValidationResult
from ..orchestration.importer import ImportReport


def report_to_dict(report: ImportReport) -> Dict[str, Any]:
    return {
        "source": report.source,
        "format": report.source_format.value if report.source_format else None,
        "record_count": report.record_count,
        "applied": report.applied,
        "unsupported": report.unsupported,
        "error": report.error,
        "invalid_count": report.invalid_count,
        "warning_count": report.warning_count,
        "validation": [validation_to_dict(item) for item in report.validation if item.errors or item.warnings],
    }


def validation_to_dict(result: ValidationResult) -> Dict[str, Any]:
    return {
        "employee_number": result.record.employee_number,
        "is_valid": result.is_valid,
        "errors": list(result.errors),
        "warnings": list(result.warnings),
    }


def persist_report(report: ImportReport, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = report_to_dict(report)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


__all__ = ["persist_report", "report_to_dict", "validation_to_dict"]
