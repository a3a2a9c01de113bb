"""Core data models for HR employee records."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .ingestion.dates import parse_flexible_date
from .mapping.field_mapping import DEFAULT_MAPPING, FieldMapping


@dataclass(slots=True)
class EmployeeRecord:
    """Typed view of one canonical employee row.

    Columns outside the field catalog are kept in ``extra`` so that
    ``to_dict`` gives back every column the source row had.
    """

    employee_number: str
    arabic_name: Optional[str] = None
    english_name: Optional[str] = None
    civil_id: Optional[str] = None
    civil_id_expiry: Optional[str] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    passport_expiry: Optional[str] = None
    unified_number: Optional[str] = None
    contract_date: Optional[str] = None
    contract_status: Optional[str] = None
    work_site: Optional[str] = None
    job_title: Optional[str] = None
    work_schedule: Optional[str] = None
    current_salary: Optional[str] = None
    work_permit_salary: Optional[str] = None
    company_name: Optional[str] = None
    admin_notes: Optional[str] = None
    additional_notes: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], mapping: FieldMapping = DEFAULT_MAPPING) -> "EmployeeRecord":
        """Project a label-keyed row onto the typed fields."""
        values: Dict[str, Optional[str]] = {}
        extra: Dict[str, Any] = {}
        for label, value in payload.items():
            field_name = mapping.field_for(label)
            if field_name is None:
                extra[label] = value
            else:
                values[field_name] = _clean(value)
        employee_number = values.pop("employee_number", None) or ""
        return cls(employee_number=employee_number, extra=extra, **values)

    def to_dict(self, mapping: FieldMapping = DEFAULT_MAPPING) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for field_name, label in mapping.field_to_label.items():
            value = getattr(self, field_name)
            payload[label] = "" if value is None else value
        payload.update(self.extra)
        return payload

    @property
    def civil_id_expiry_date(self) -> Optional[date]:
        return parse_flexible_date(self.civil_id_expiry)

    @property
    def passport_expiry_date(self) -> Optional[date]:
        return parse_flexible_date(self.passport_expiry)

    @property
    def contract_start_date(self) -> Optional[date]:
        return parse_flexible_date(self.contract_date)


@dataclass(slots=True)
class ValidationResult:
    """Outcome of validating an employee record."""

    record: EmployeeRecord
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def summary(self) -> str:
        label = self.record.employee_number or "<no employee number>"
        if self.is_valid and not self.warnings:
            return f"{label}: valid"
        if self.is_valid:
            joined = "; ".join(self.warnings)
            return f"{label}: valid with warnings - {joined}"
        joined = "; ".join(self.errors)
        return f"{label}: invalid - {joined}"


def employee_field_names() -> List[str]:
    return [item.name for item in fields(EmployeeRecord) if item.name != "extra"]


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    trimmed = str(value).strip()
    return trimmed or None


def records_from_iterable(items: Iterable[Dict[str, Any]]) -> List[EmployeeRecord]:
    """Convert an iterable of label-keyed rows into employee records."""
    return [EmployeeRecord.from_dict(item) for item in items]
