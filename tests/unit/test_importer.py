"""Unit tests for the import service."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from hr_records.errors import SourceReadError
from hr_records.ingestion.decoder import SourceFormat
from hr_records.orchestration.importer import ImportService
from hr_records.store.employee_store import EmployeeStore
from tests.helpers import LABEL, employee_row, make_xlsx

NUMBER = LABEL("employee_number")


def _write_json(path: Path, rows) -> Path:
    path.write_text(json.dumps(rows, ensure_ascii=False), encoding="utf-8")
    return path


def test_import_file_replaces_and_persists(tmp_path: Path, store: EmployeeStore, employees) -> None:
    store.restore([employee_row("1")])
    source = _write_json(tmp_path / "backup.json", employees)

    report = ImportService(store).import_file(source)

    assert report.applied
    assert report.source_format is SourceFormat.JSON
    assert report.record_count == 3
    assert report.invalid_count == 0
    assert [emp[NUMBER] for emp in store.employees] == ["60001", "60002", "60010"]
    reloaded = EmployeeStore(store.storage)
    reloaded.load_from_storage()
    assert len(reloaded) == 3


def test_malformed_import_leaves_store_untouched(store: EmployeeStore, employees) -> None:
    store.restore(employees)

    report = ImportService(store).import_content('{"not": "a list"}', "json")

    assert not report.applied
    assert report.error is not None
    assert len(store) == 3


def test_empty_import_is_rejected_with_message(store: EmployeeStore) -> None:
    report = ImportService(store).import_content("a,b,c", "csv")

    assert not report.applied
    assert report.error == "The data file is empty or contains no records"


def test_unsupported_import_is_flagged(store: EmployeeStore) -> None:
    report = ImportService(store).import_content("anything", "docx")

    assert report.unsupported
    assert report.error is None
    assert not report.applied


def test_import_file_raises_for_unreadable_source(tmp_path: Path, store: EmployeeStore) -> None:
    with pytest.raises(SourceReadError):
        ImportService(store).import_file(tmp_path / "nope.csv")


def test_initial_data_prefers_spreadsheet_over_other_candidates(tmp_path: Path, store: EmployeeStore) -> None:
    (tmp_path / "DB.xlsx").write_bytes(make_xlsx([[NUMBER], ["70001"]]))
    _write_json(tmp_path / "DB.json", [employee_row("80001")])

    report = ImportService(store).load_initial_data(tmp_path)

    assert report is not None
    assert report.source_format is SourceFormat.SPREADSHEET
    assert [emp[NUMBER] for emp in store.employees] == ["70001"]


def test_initial_data_skips_broken_and_empty_candidates(tmp_path: Path, store: EmployeeStore) -> None:
    (tmp_path / "DB.xlsx").write_bytes(b"broken")
    _write_json(tmp_path / "DB.json", [])
    (tmp_path / "DB.yml").write_text(f"- {NUMBER}: 90001\n", encoding="utf-8")
    (tmp_path / "DB.csv").write_text(f"{NUMBER}\n99999\n", encoding="utf-8")

    report = ImportService(store).load_initial_data(tmp_path)

    assert report is not None
    assert report.source.endswith("DB.yml")
    assert [emp[NUMBER] for emp in store.employees] == ["90001"]


def test_initial_data_falls_back_to_storage(tmp_path: Path, store: EmployeeStore, employees) -> None:
    store.restore(employees)
    store.save_to_storage()
    fresh = EmployeeStore(store.storage)

    report = ImportService(fresh).load_initial_data(tmp_path / "no-data-dir")

    assert report is None
    assert len(fresh) == 3


def test_validation_results_are_attached(store: EmployeeStore) -> None:
    rows = [employee_row("1"), {NUMBER: "2"}]

    report = ImportService(store).import_content(json.dumps(rows, ensure_ascii=False), "json")

    assert report.applied
    assert report.invalid_count == 1
