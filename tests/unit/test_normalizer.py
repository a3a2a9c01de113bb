"""Unit tests for the record normalizer."""
from __future__ import annotations

from hr_records.ingestion.normalizer import RecordNormalizer
from hr_records.mapping.field_mapping import DATE_LABELS, DEFAULT_MAPPING

CIVIL_EXPIRY, PASSPORT_EXPIRY, CONTRACT_DATE = DATE_LABELS
NAME = DEFAULT_MAPPING.label_for("english_name")


def test_keys_are_trimmed_across_rows() -> None:
    rows = [{" Name ": "a"}, {"Name": "b"}]

    normalized = RecordNormalizer().normalize_rows(rows)

    assert [list(row) for row in normalized] == [["Name"], ["Name"]]
    assert [row["Name"] for row in normalized] == ["a", "b"]


def test_date_columns_are_rewritten_and_others_untouched() -> None:
    row = {
        f" {CIVIL_EXPIRY}": "29/06/2026",
        PASSPORT_EXPIRY: "2088-11-10",
        CONTRACT_DATE: "not a date",
        NAME: " HASSAN ",
    }

    normalized = RecordNormalizer().normalize_row(row)

    assert normalized == {
        CIVIL_EXPIRY: "2026/06/29",
        PASSPORT_EXPIRY: "2088/11/10",
        CONTRACT_DATE: "--",
        NAME: " HASSAN ",
    }


def test_input_rows_are_not_mutated() -> None:
    row = {f" {CONTRACT_DATE} ": "9/7/1993"}
    rows = [row]

    normalized = RecordNormalizer().normalize_rows(rows)

    assert row == {f" {CONTRACT_DATE} ": "9/7/1993"}
    assert normalized[0] is not row
    assert normalized == [{CONTRACT_DATE: "1993/07/09"}]


def test_normalizing_canonical_rows_is_idempotent() -> None:
    normalizer = RecordNormalizer()
    first = normalizer.normalize_rows([{CIVIL_EXPIRY: "2026-6-29", CONTRACT_DATE: "", NAME: "x"}])

    second = normalizer.normalize_rows(first)

    assert second == first
    assert first[0][CIVIL_EXPIRY] == "2026/06/29"
    assert first[0][CONTRACT_DATE] == "--"


def test_preserves_row_order() -> None:
    rows = [{NAME: str(index)} for index in range(5)]

    assert [row[NAME] for row in RecordNormalizer().normalize_rows(rows)] == ["0", "1", "2", "3", "4"]
