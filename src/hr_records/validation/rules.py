"""Validation rule set for employee records."""
from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from ..ingestion.dates import MISSING_DATE, parse_flexible_date
from ..mapping.field_mapping import DATE_FIELDS, DEFAULT_MAPPING, REQUIRED_FIELDS, FieldMapping
from ..models import EmployeeRecord, ValidationResult


class EmployeeValidator:
    """Checks employee records before they are added to or updated in the store."""

    SALARY_FIELDS = ("current_salary", "work_permit_salary")

    def __init__(self, mapping: FieldMapping = DEFAULT_MAPPING) -> None:
        self.mapping = mapping

    def validate(self, record: EmployeeRecord, existing_ids: Iterable[str] | None = None) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        for field_name in REQUIRED_FIELDS:
            value = getattr(record, field_name)
            if not value or (field_name in DATE_FIELDS and value == MISSING_DATE):
                errors.append(f"Missing required field '{self.mapping.label_for(field_name)}'")

        if existing_ids is not None and record.employee_number:
            taken = {str(item) for item in existing_ids}
            if str(record.employee_number) in taken:
                errors.append(f"Employee number '{record.employee_number}' is already in use")

        for field_name in DATE_FIELDS:
            value = getattr(record, field_name)
            if value and value != MISSING_DATE and parse_flexible_date(value) is None:
                warnings.append(
                    f"{self.mapping.label_for(field_name)} '{value}' could not be parsed; expected YYYY/MM/DD"
                )

        for field_name in self.SALARY_FIELDS:
            value = getattr(record, field_name)
            if value and not _is_number(value):
                warnings.append(f"{self.mapping.label_for(field_name)} '{value}' is not numeric")

        return ValidationResult(record=record, is_valid=not errors, errors=errors, warnings=warnings)

    def validate_many(self, records: Iterable[EmployeeRecord]) -> List[ValidationResult]:
        records = list(records)
        counts = Counter(record.employee_number for record in records if record.employee_number)
        results = []
        for record in records:
            result = self.validate(record)
            if counts.get(record.employee_number, 0) > 1:
                result.warnings.append(f"Employee number '{record.employee_number}' appears more than once")
            results.append(result)
        return results


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


__all__ = ["EmployeeValidator"]
