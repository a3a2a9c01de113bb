"""Unit tests for JSON logging and report persistence."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from hr_records.observability.logger import JsonFormatter
from hr_records.observability.reporting import persist_report
from hr_records.orchestration.importer import ImportService
from hr_records.store.employee_store import EmployeeStore
from tests.helpers import LABEL


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("importer", logging.INFO, __file__, 1, "Decoded %s", ("rows",), None)
    record.count = 3

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Decoded rows"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "importer"
    assert payload["count"] == 3
    assert "lineno" not in payload


def test_persist_report_writes_summary(tmp_path: Path, store: EmployeeStore) -> None:
    content = f"{LABEL('employee_number')}\n60001\n"
    report = ImportService(store).import_content(content, "csv", source="upload.csv")
    target = tmp_path / "reports" / "import.json"

    persist_report(report, target)

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["source"] == "upload.csv"
    assert payload["format"] == "csv"
    assert payload["record_count"] == 1
    assert payload["applied"] is True
    assert payload["invalid_count"] == 1
    assert payload["validation"][0]["employee_number"] == "60001"
