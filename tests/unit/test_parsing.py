from __future__ import annotations

from datetime import date

import pytest

from employee_records.parsing import (
    ParseError,
    is_affirmative,
    parse_date,
    parse_int,
    parse_salary,
)


def test_parse_int_strips_whitespace():
    assert parse_int(" 7 ") == 7


@pytest.mark.parametrize("raw", ["", "seven", "1.5"])
def test_parse_int_rejects_non_integers(raw: str):
    with pytest.raises(ParseError):
        parse_int(raw)


@pytest.mark.parametrize(
    "raw,expected",
    [("75000", 75000.0), ("62000.50", 62000.5), (" 1,250.75 ", 1250.75), ("-10", -10.0)],
)
def test_parse_salary_accepts_decimals(raw: str, expected: float):
    assert parse_salary(raw) == expected


@pytest.mark.parametrize("raw", ["", "lots", "nan", "inf"])
def test_parse_salary_rejects_garbage(raw: str):
    with pytest.raises(ParseError):
        parse_salary(raw)


def test_parse_date_reads_iso_dates():
    assert parse_date("2020-03-15") == date(2020, 3, 15)


@pytest.mark.parametrize("raw", ["2020-13-01", "2020-02-30", "15/03/2020", "20200315", "2020-W01-1"])
def test_parse_date_rejects_other_formats(raw: str):
    with pytest.raises(ParseError) as excinfo:
        parse_date(raw)
    assert "YYYY-MM-DD" in str(excinfo.value)


def test_parse_error_is_a_value_error():
    assert issubclass(ParseError, ValueError)


@pytest.mark.parametrize("raw,expected", [("y", True), ("YES", True), (" Yes ", True), ("", False), ("n", False)])
def test_is_affirmative(raw: str, expected: bool):
    assert is_affirmative(raw) is expected
