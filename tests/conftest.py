"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

# Ensure project modules are importable
ROOT_DIR = Path(__file__).resolve().parents[1]
for path in (ROOT_DIR, ROOT_DIR / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from hr_records.store.employee_store import EmployeeStore  # noqa: E402
from hr_records.store.local_storage import LocalStorage  # noqa: E402
from tests.helpers import employee_row  # noqa: E402


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "storage.db")


@pytest.fixture
def store(storage: LocalStorage) -> EmployeeStore:
    return EmployeeStore(storage)


@pytest.fixture
def employees() -> List[dict[str, str]]:
    return [
        employee_row("60001"),
        employee_row(
            "60002",
            english_name="SARA AHMED",
            arabic_name="سارة أحمد",
            nationality="مصري",
            contract_status="منتهى",
            job_title="محاسب",
            current_salary="700",
        ),
        employee_row("60010", english_name="ALI HASSAN", arabic_name="علي حسن", current_salary="650"),
    ]
