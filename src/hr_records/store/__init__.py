"""Employee storage."""
from .employee_store import EmployeeFilter, EmployeeStatistics, EmployeeStore
from .local_storage import LocalStorage

__all__ = ["EmployeeFilter", "EmployeeStatistics", "EmployeeStore", "LocalStorage"]
