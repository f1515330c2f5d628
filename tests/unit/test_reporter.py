from __future__ import annotations

from rich.console import Console

from employee_records import reporter
from employee_records.store import RecordStore


def test_format_salary():
    assert reporter.format_salary(75000) == "$75,000.00"
    assert reporter.format_salary(1234.5, "EUR ") == "EUR 1,234.50"


def test_print_employees_lists_rows_and_total(console: Console, seeded_store: RecordStore):
    reporter.print_employees(console, seeded_store.list_all())
    text = console.export_text()
    assert "john.doe@company.com" in text
    assert "$85,000.00" in text
    assert "Total employees: 5" in text


def test_print_employees_empty(console: Console):
    reporter.print_employees(console, [])
    assert "No employees found." in console.export_text()


def test_print_search_results_without_matches(console: Console):
    reporter.print_search_results(console, [], "name containing 'zzz'")
    assert "No employees found with name containing 'zzz'" in console.export_text()


def test_print_statistics(console: Console, seeded_store: RecordStore):
    reporter.print_statistics(console, seeded_store.statistics())
    text = console.export_text()
    assert "Total Employees" in text
    assert "$69,000.00" in text
    assert "$85,000.00" in text
    assert "$55,000.00" in text
    assert "Engineering" in text


def test_print_statistics_empty(console: Console, store: RecordStore):
    reporter.print_statistics(console, store.statistics())
    assert "No employees to analyze." in console.export_text()


def test_markup_in_values_is_printed_literally(console: Console, store: RecordStore):
    store.add("[bold]Eve[/bold]", "eve@company.com", "[red]", "", 1.0).unwrap()
    reporter.print_employees(console, store.list_all())
    text = console.export_text()
    assert "[bold]Eve[/bold]" in text
    assert "[red]" in text
