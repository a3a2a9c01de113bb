"""Unit tests for employee record models."""
from __future__ import annotations

from datetime import date

from hr_records.mapping.field_mapping import DEFAULT_MAPPING
from hr_records.models import EmployeeRecord, ValidationResult, employee_field_names, records_from_iterable
from tests.helpers import LABEL, employee_row


def test_field_catalog_covers_every_record_field() -> None:
    assert sorted(employee_field_names()) == sorted(DEFAULT_MAPPING.field_to_label)


def test_from_dict_projects_labels_and_keeps_unknown_columns() -> None:
    row = employee_row("60001", passport_expiry="2088/11/10")
    row["عمود إضافي"] = "x"

    record = EmployeeRecord.from_dict(row)

    assert record.employee_number == "60001"
    assert record.english_name == "HASSAN FALAH"
    assert record.passport_expiry_date == date(2088, 11, 10)
    assert record.contract_start_date == date(1993, 7, 9)
    assert record.extra == {"عمود إضافي": "x"}


def test_to_dict_round_trips_through_labels() -> None:
    row = employee_row("60001")

    payload = EmployeeRecord.from_dict(row).to_dict()

    assert payload[LABEL("employee_number")] == "60001"
    assert payload[LABEL("admin_notes")] == ""
    assert set(DEFAULT_MAPPING.labels()) <= set(payload)


def test_blank_values_become_none_and_placeholder_date_is_absent() -> None:
    record = EmployeeRecord.from_dict({LABEL("employee_number"): " ", LABEL("civil_id_expiry"): "--"})

    assert record.employee_number == ""
    assert record.civil_id_expiry == "--"
    assert record.civil_id_expiry_date is None
    assert record.arabic_name is None


def test_validation_summary_formats() -> None:
    record = records_from_iterable([employee_row("60001")])[0]

    assert ValidationResult(record, True).summary() == "60001: valid"
    assert ValidationResult(record, True, warnings=["w"]).summary() == "60001: valid with warnings - w"
    assert ValidationResult(record, False, errors=["a", "b"]).summary() == "60001: invalid - a; b"
