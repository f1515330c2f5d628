"""
Domain models for the Employee Records console.

Records are frozen so a caller holding one cannot change store state behind
the store's back; the only mutation path is `RecordStore.update`.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """
    A single employee record owned by the record store.
    """

    id: int = Field(..., gt=0, description="Store-assigned identifier.")
    name: str = Field(..., description="Full name, never blank.")
    email: str = Field(..., description="Contact email, unique ignoring case.")
    department: str = Field("", description="Department name; may be empty.")
    position: str = Field("", description="Job title; may be empty.")
    salary: float = Field(..., description="Annual salary.")
    hire_date: date = Field(..., description="Hire date (no timezone).")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


class EmployeeUpdate(BaseModel):
    """
    Partial update payload.

    `None` keeps the current value. Blank text also keeps it, so a text field
    cannot be cleared to empty through an update.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[date] = None

    model_config = {"extra": "forbid"}

    def changes(self) -> Dict[str, object]:
        """Fields that would overwrite the current record."""
        changed: Dict[str, object] = {}
        for key, value in self.model_dump().items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            changed[key] = value
        return changed


class EmployeeStatistics(BaseModel):
    """Aggregate view over all live records."""

    count: int
    average_salary: float
    max_salary: float
    min_salary: float
    department_counts: Dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}


__all__ = ["Employee", "EmployeeUpdate", "EmployeeStatistics"]
