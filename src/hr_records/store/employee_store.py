"""In-memory employee list with key-value persistence, CRUD and filtering."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..mapping.field_mapping import ACTIVE_STATUS, DEFAULT_MAPPING
from .local_storage import LocalStorage

STORAGE_KEY = "hrSystemData"
MIN_GENERATED_ID = 60000

EMPLOYEE_NUMBER = DEFAULT_MAPPING.label_for("employee_number")
ARABIC_NAME = DEFAULT_MAPPING.label_for("arabic_name")
ENGLISH_NAME = DEFAULT_MAPPING.label_for("english_name")
NATIONALITY = DEFAULT_MAPPING.label_for("nationality")
CONTRACT_STATUS = DEFAULT_MAPPING.label_for("contract_status")
JOB_TITLE = DEFAULT_MAPPING.label_for("job_title")
WORK_SCHEDULE = DEFAULT_MAPPING.label_for("work_schedule")
CURRENT_SALARY = DEFAULT_MAPPING.label_for("current_salary")

Employee = Dict[str, Any]


@dataclass(frozen=True)
class EmployeeFilter:
    search: str = ""
    nationality: str = ""
    status: str = ""
    job: str = ""
    schedule: str = ""

    def matches(self, employee: Employee) -> bool:
        if self.nationality and employee.get(NATIONALITY) != self.nationality:
            return False
        if self.status and employee.get(CONTRACT_STATUS) != self.status:
            return False
        if self.job and employee.get(JOB_TITLE) != self.job:
            return False
        if self.schedule and employee.get(WORK_SCHEDULE) != self.schedule:
            return False
        term = self.search.strip().lower()
        if not term:
            return True
        return (
            term in str(employee.get(ARABIC_NAME) or "").lower()
            or term in str(employee.get(ENGLISH_NAME) or "").lower()
            or term in str(employee.get(EMPLOYEE_NUMBER) or "")
        )


@dataclass(frozen=True)
class EmployeeStatistics:
    total: int
    active: int
    inactive: int
    average_salary: int


class EmployeeStore:
    """Owns the current employee list; rows are label-keyed canonical records."""

    def __init__(
        self,
        storage: LocalStorage,
        storage_key: str = STORAGE_KEY,
        logger: logging.Logger | None = None,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self._employees: List[Employee] = []
        self._filtered: List[Employee] = []
        self.last_update: Optional[str] = None

    @property
    def employees(self) -> List[Employee]:
        return list(self._employees)

    @property
    def filtered(self) -> List[Employee]:
        return list(self._filtered)

    def __len__(self) -> int:
        return len(self._employees)

    # ---- persistence --------------------------------------------------
    def load_from_storage(self) -> None:
        raw = self.storage.get_item(self.storage_key)
        if not raw:
            self._employees = []
            return
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            self.logger.warning("Stored employee data is not valid JSON; starting empty")
            self._employees = []
            return
        employees = payload.get("employees") if isinstance(payload, dict) else None
        self._employees = [dict(item) for item in employees or [] if isinstance(item, dict)]
        self.last_update = payload.get("lastUpdate") if isinstance(payload, dict) else None
        self.logger.info("Loaded employees from storage", extra={"count": len(self._employees)})

    def save_to_storage(self) -> None:
        self.last_update = datetime.now(timezone.utc).isoformat()
        payload = {"employees": self._employees, "lastUpdate": self.last_update}
        self.storage.set_item(self.storage_key, json.dumps(payload, ensure_ascii=False))

    # ---- CRUD ---------------------------------------------------------
    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        for employee in self._employees:
            if str(employee.get(EMPLOYEE_NUMBER)) == str(employee_id):
                return dict(employee)
        return None

    def add(self, employee: Employee) -> None:
        self._employees.append(dict(employee))

    def update(self, employee: Employee) -> bool:
        employee_id = str(employee.get(EMPLOYEE_NUMBER))
        for index, current in enumerate(self._employees):
            if str(current.get(EMPLOYEE_NUMBER)) == employee_id:
                self._employees[index] = dict(employee)
                return True
        return False

    def delete_by_id(self, employee_id: Any) -> bool:
        before = len(self._employees)
        self._employees = [emp for emp in self._employees if str(emp.get(EMPLOYEE_NUMBER)) != str(employee_id)]
        return len(self._employees) != before

    def is_id_taken(self, employee_id: Any) -> bool:
        return any(str(emp.get(EMPLOYEE_NUMBER)) == str(employee_id) for emp in self._employees)

    def generate_id(self) -> str:
        highest = MIN_GENERATED_ID
        for employee in self._employees:
            try:
                highest = max(highest, int(str(employee.get(EMPLOYEE_NUMBER)).strip()))
            except ValueError:
                continue
        return str(highest + 1)

    def restore(self, employees: List[Employee]) -> None:
        self._employees = [dict(item) for item in employees]

    def clear(self) -> None:
        self._employees = []
        self._filtered = []
        self.last_update = None
        self.storage.remove_item(self.storage_key)

    # ---- views --------------------------------------------------------
    def apply_filters(self, criteria: EmployeeFilter | None = None) -> List[Employee]:
        criteria = criteria or EmployeeFilter()
        self._filtered = [dict(emp) for emp in self._employees if criteria.matches(emp)]
        return self.filtered

    def statistics(self) -> EmployeeStatistics:
        total = len(self._employees)
        active = sum(1 for emp in self._employees if emp.get(CONTRACT_STATUS) == ACTIVE_STATUS)
        salaries = sum(_salary(emp.get(CURRENT_SALARY)) for emp in self._employees)
        average = math.floor(salaries / total + 0.5) if total else 0
        return EmployeeStatistics(total=total, active=active, inactive=total - active, average_salary=average)

    def filter_options(self, label: str) -> List[str]:
        values = {str(emp.get(label)) for emp in self._employees if emp.get(label)}
        return sorted(values)


def _salary(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


__all__ = ["EmployeeFilter", "EmployeeStatistics", "EmployeeStore", "STORAGE_KEY"]
