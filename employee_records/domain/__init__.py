"""
Domain package for the Employee Records console.

Exports the record models and the store outcome contract. Keep this package
focused on data definitions and validation concerns.
"""

from employee_records.domain.models import Employee, EmployeeStatistics, EmployeeUpdate
from employee_records.domain.results import (
    ErrorKind,
    StoreError,
    StoreOperationError,
    StoreResult,
)

__all__ = [
    "Employee",
    "EmployeeStatistics",
    "EmployeeUpdate",
    "ErrorKind",
    "StoreError",
    "StoreOperationError",
    "StoreResult",
]
