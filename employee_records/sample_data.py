"""
Sample employees loaded at startup so a fresh session has something to show.
"""

from __future__ import annotations

from datetime import date
from typing import List, NamedTuple

from employee_records.store import RecordStore
from employee_records.utils.logging import get_logger

log = get_logger(__name__)


class SampleEmployee(NamedTuple):
    name: str
    email: str
    department: str
    position: str
    salary: float
    hire_date: date


SAMPLE_EMPLOYEES: List[SampleEmployee] = [
    SampleEmployee("John Doe", "john.doe@company.com", "Engineering", "Software Developer", 75000, date(2020, 3, 15)),
    SampleEmployee("Jane Smith", "jane.smith@company.com", "Marketing", "Marketing Manager", 68000, date(2019, 7, 10)),
    SampleEmployee("Bob Johnson", "bob.johnson@company.com", "Engineering", "Senior Developer", 85000, date(2018, 1, 20)),
    SampleEmployee("Alice Brown", "alice.brown@company.com", "HR", "HR Specialist", 55000, date(2021, 5, 8)),
    SampleEmployee("Charlie Wilson", "charlie.wilson@company.com", "Finance", "Financial Analyst", 62000, date(2020, 9, 12)),
]


def seed_sample_data(store: RecordStore) -> List[int]:
    """
    Add the sample employees and return the ids they were assigned.

    Entries whose email is already present are skipped.
    """
    ids: List[int] = []
    for sample in SAMPLE_EMPLOYEES:
        result = store.add(*sample)
        if result.ok:
            ids.append(result.unwrap())
    log.info("Sample data seeded", extra={"seeded": len(ids)})
    return ids


__all__ = ["SampleEmployee", "SAMPLE_EMPLOYEES", "seed_sample_data"]
