"""Print stored employees from the local storage database."""
from __future__ import annotations

import argparse
import json
from typing import Optional

from hr_records.config import Settings
from hr_records.store.employee_store import EmployeeFilter, EmployeeStore
from hr_records.store.local_storage import LocalStorage


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Show stored employees")
    parser.add_argument("--storage", dest="storage_path", default=str(settings.storage_path))
    parser.add_argument("--search", default="", help="Filter by name or employee number")
    parser.add_argument("--stats", action="store_true", help="Print totals instead of records")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    store = EmployeeStore(LocalStorage(args.storage_path))
    store.load_from_storage()
    if not len(store):
        print("No employees stored yet. Import a data file first.")
        return 1

    if args.stats:
        stats = store.statistics()
        print(f"total={stats.total} active={stats.active} inactive={stats.inactive} avg_salary={stats.average_salary}")
        return 0

    employees = store.apply_filters(EmployeeFilter(search=args.search))
    for idx, employee in enumerate(employees, start=1):
        print(f"[{idx}]")
        print(json.dumps(employee, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI utility
    raise SystemExit(main())
