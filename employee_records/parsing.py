"""
Text-to-value conversion for console input.

`ParseError` never reaches the record store; the console driver catches it and
re-prompts (or keeps the current value during an update).
"""

from __future__ import annotations

import re
from datetime import date

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ParseError(ValueError):
    """Console input could not be converted to the expected type."""

    def __init__(self, expected: str, raw: str):
        super().__init__(f"Expected {expected}, got {raw!r}")
        self.expected = expected
        self.raw = raw


def parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ParseError("a whole number", raw) from exc


def parse_salary(raw: str) -> float:
    """Parse a decimal salary such as ``75000`` or ``62000.50``."""
    text = raw.strip().replace(",", "")
    try:
        value = float(text)
    except ValueError as exc:
        raise ParseError("a number", raw) from exc
    if value != value or value in (float("inf"), float("-inf")):
        raise ParseError("a finite number", raw)
    return value


def parse_date(raw: str) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    text = raw.strip()
    if not _ISO_DATE.match(text):
        raise ParseError("a date in YYYY-MM-DD format", raw)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ParseError("a date in YYYY-MM-DD format", raw) from exc


def is_affirmative(raw: str) -> bool:
    return raw.strip().lower() in {"y", "yes"}


__all__ = ["ParseError", "parse_int", "parse_salary", "parse_date", "is_affirmative"]
