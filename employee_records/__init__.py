"""
Employee Records - in-memory employee record management console.

This package provides:

- A record store with id-keyed CRUD, email uniqueness and search
- Salary and department statistics
- A numbered-menu console session and a small typer CLI

Nothing is persisted; every run starts from an empty (or sample-seeded) store.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from employee_records.config import Settings, get_settings
from employee_records.domain import (
    Employee,
    EmployeeStatistics,
    EmployeeUpdate,
    ErrorKind,
    StoreError,
    StoreOperationError,
    StoreResult,
)
from employee_records.store import RecordStore
from employee_records.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Employee",
    "EmployeeStatistics",
    "EmployeeUpdate",
    "ErrorKind",
    "StoreError",
    "StoreOperationError",
    "StoreResult",
    # Store
    "RecordStore",
    # Logging
    "configure_logging",
    "get_logger",
]
