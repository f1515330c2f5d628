"""
In-memory record store for employee records.

Owns the id -> Employee mapping and the id counter, enforces email uniqueness,
and answers lookups and aggregates. Expected failures come back as
`StoreResult` errors rather than exceptions. Arguments of the wrong type
(a non-numeric salary, an unknown update field) are caller bugs and raise
pydantic `ValidationError` before any state changes.

Usage:
    from employee_records.store import RecordStore

    store = RecordStore()
    new_id = store.add("John Doe", "john@company.com", "Engineering", "Dev", 75000, date(2020, 3, 15)).unwrap()
    store.update(new_id, salary=80000)
    print(store.statistics())
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, List, Optional

from employee_records.domain.models import Employee, EmployeeStatistics, EmployeeUpdate
from employee_records.domain.results import ErrorKind, StoreResult
from employee_records.utils.logging import get_logger

log = get_logger(__name__)


def _email_key(email: str) -> str:
    return email.strip().lower()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RecordStore:
    """
    Mapping-backed CRUD store with linear-scan search and statistics.

    Records are kept in insertion order. Ids start at 1, only ever grow, and
    are never reused after a delete.
    """

    def __init__(self) -> None:
        self._employees: Dict[int, Employee] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        key = _email_key(email)
        return any(
            _email_key(emp.email) == key
            for emp_id, emp in self._employees.items()
            if emp_id != exclude_id
        )

    def _fail(self, kind: ErrorKind, message: str, **extra: object) -> StoreResult:
        log.warning(message, extra={"error_kind": kind.value, **extra})
        return StoreResult.failure(kind, message)

    def add(
        self,
        name: str,
        email: str,
        department: str = "",
        position: str = "",
        salary: float = 0.0,
        hire_date: Optional[date] = None,
    ) -> StoreResult[int]:
        """
        Create a record and return its new id.

        Fails with VALIDATION when name or email is blank and with
        DUPLICATE_EMAIL when the email is already used (ignoring case).
        A non-numeric salary or non-date hire_date raises ValidationError.
        """
        if _is_blank(name) or _is_blank(email):
            return self._fail(ErrorKind.VALIDATION, "Name and email are required fields.")
        if self._email_taken(email):
            return self._fail(
                ErrorKind.DUPLICATE_EMAIL,
                "Employee with this email already exists.",
                email=email,
            )

        employee = Employee(
            id=self._next_id,
            name=name,
            email=email,
            department=department or "",
            position=position or "",
            salary=salary,
            hire_date=hire_date if hire_date is not None else date.today(),
        )
        self._employees[employee.id] = employee
        self._next_id += 1
        log.info("Employee added", extra={"employee_id": employee.id})
        return StoreResult.success(employee.id)

    def update(
        self,
        employee_id: int,
        patch: Optional[EmployeeUpdate] = None,
        **fields: object,
    ) -> StoreResult[Employee]:
        """
        Apply a partial update and return the updated record.

        Accepts either an `EmployeeUpdate` or the same fields as keywords.
        Omitted, None and blank-text fields keep their current value.
        """
        if patch is None:
            patch = EmployeeUpdate(**fields)
        elif fields:
            patch = EmployeeUpdate(**{**patch.model_dump(exclude_unset=True), **fields})

        current = self._employees.get(employee_id)
        if current is None:
            return self._fail(
                ErrorKind.NOT_FOUND,
                f"Employee with ID {employee_id} not found.",
                employee_id=employee_id,
            )

        changes = patch.changes()
        new_email = changes.get("email")
        if new_email is not None and new_email != current.email:
            if self._email_taken(str(new_email), exclude_id=employee_id):
                return self._fail(
                    ErrorKind.DUPLICATE_EMAIL,
                    "Another employee with this email already exists.",
                    employee_id=employee_id,
                    email=new_email,
                )

        updated = current.model_copy(update=changes)
        self._employees[employee_id] = updated
        log.info(
            "Employee updated",
            extra={"employee_id": employee_id, "fields": sorted(changes)},
        )
        return StoreResult.success(updated)

    def delete(self, employee_id: int) -> StoreResult[Employee]:
        removed = self._employees.pop(employee_id, None)
        if removed is None:
            return self._fail(
                ErrorKind.NOT_FOUND,
                f"Employee with ID {employee_id} not found.",
                employee_id=employee_id,
            )
        log.info("Employee deleted", extra={"employee_id": employee_id})
        return StoreResult.success(removed)

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def find_by_name(self, fragment: str) -> List[Employee]:
        """Case-insensitive substring match on name."""
        needle = fragment.lower()
        return [emp for emp in self._employees.values() if needle in emp.name.lower()]

    def find_by_department(self, department: str) -> List[Employee]:
        """Case-insensitive exact match on department."""
        wanted = department.lower()
        return [emp for emp in self._employees.values() if emp.department.lower() == wanted]

    def list_all(self) -> List[Employee]:
        return list(self._employees.values())

    def statistics(self) -> Optional[EmployeeStatistics]:
        """
        Aggregate salary and department figures.

        Returns None for an empty store. Records with an empty department are
        counted under the "" bucket.
        """
        if not self._employees:
            return None

        salaries = [emp.salary for emp in self._employees.values()]
        departments = Counter(emp.department for emp in self._employees.values())
        return EmployeeStatistics(
            count=len(salaries),
            average_salary=sum(salaries) / len(salaries),
            max_salary=max(salaries),
            min_salary=min(salaries),
            department_counts=dict(departments),
        )


__all__ = ["RecordStore"]
