"""
Pytest configuration for the Employee Records console.

Provides fixtures for:
- Empty and sample-seeded record stores
- A rich console that records output for assertions
- Scripted console sessions
"""

from __future__ import annotations

import io
from typing import Callable, List

import pytest
from rich.console import Console

from employee_records.config import get_settings
from employee_records.driver import ConsoleDriver
from employee_records.sample_data import seed_sample_data
from employee_records.store import RecordStore


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Settings are lru_cached; tests that patch the environment need a fresh read.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def seeded_store() -> RecordStore:
    """
    Store holding the five sample employees (ids 1-5).
    """
    store = RecordStore()
    seed_sample_data(store)
    return store


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, record=True)


@pytest.fixture
def run_session(console: Console) -> Callable[[RecordStore, List[str]], str]:
    """
    Drive a ConsoleDriver with scripted input lines and return everything it printed.
    """

    def _run(target: RecordStore, lines: List[str]) -> str:
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        ConsoleDriver(target, console=console, stream=stream).run()
        return console.export_text()

    return _run
