from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from employee_records.domain.models import Employee, EmployeeStatistics


def format_salary(amount: float, currency: str = "$") -> str:
    return f"{currency}{amount:,.2f}"


def describe_employee(employee: Employee, currency: str = "$") -> str:
    """One-line summary used for confirmations and the update prompt."""
    return (
        f"ID: {employee.id} | Name: {employee.name} | Email: {employee.email} | "
        f"Department: {employee.department} | Position: {employee.position} | "
        f"Salary: {format_salary(employee.salary, currency)} | "
        f"Hire Date: {employee.hire_date.isoformat()}"
    )


def employees_table(
    employees: Iterable[Employee],
    title: Optional[str] = None,
    caption: Optional[str] = None,
    currency: str = "$",
) -> Table:
    """
    Build a rich table with one row per employee, in the given order.
    """
    table = Table(title=title, caption=caption, box=box.ROUNDED)

    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Email", style="magenta")
    table.add_column("Department", style="blue")
    table.add_column("Position")
    table.add_column("Salary", justify="right", style="green")
    table.add_column("Hire Date", justify="right", style="yellow")

    for emp in employees:
        table.add_row(
            str(emp.id),
            escape(emp.name),
            escape(emp.email),
            escape(emp.department),
            escape(emp.position),
            format_salary(emp.salary, currency),
            emp.hire_date.isoformat(),
        )
    return table


def print_employee(console: Console, employee: Employee, currency: str = "$") -> None:
    console.print(escape(describe_employee(employee, currency)))


def print_employees(console: Console, employees: Sequence[Employee], currency: str = "$") -> None:
    if not employees:
        console.print("[yellow]No employees found.[/yellow]")
        return

    console.print(employees_table(employees, title="All Employees", currency=currency))
    console.print(f"Total employees: {len(employees)}")


def print_search_results(
    console: Console,
    employees: Sequence[Employee],
    criteria: str,
    currency: str = "$",
) -> None:
    if not employees:
        console.print(f"[yellow]No employees found with {escape(criteria)}[/yellow]")
        return

    console.print(
        employees_table(
            employees, title=f"Employees found with {escape(criteria)}", currency=currency
        )
    )
    console.print(f"Total found: {len(employees)}")


def print_statistics(
    console: Console, stats: Optional[EmployeeStatistics], currency: str = "$"
) -> None:
    """
    Render aggregate salary figures and the per-department breakdown.
    """
    if stats is None:
        console.print("[yellow]No employees to analyze.[/yellow]")
        return

    summary = Table(title="Employee Statistics", box=box.ROUNDED, show_header=False)
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", justify="right", style="bold green")
    summary.add_row("Total Employees", str(stats.count))
    summary.add_row("Average Salary", format_salary(stats.average_salary, currency))
    summary.add_row("Highest Salary", format_salary(stats.max_salary, currency))
    summary.add_row("Lowest Salary", format_salary(stats.min_salary, currency))
    console.print(summary)

    departments = Table(
        title="Employees by Department",
        box=box.ROUNDED,
        caption="Sorted by headcount (descending)",
    )
    departments.add_column("Department", style="blue")
    departments.add_column("Employees", justify="right", style="magenta")
    ordered = sorted(stats.department_counts.items(), key=lambda item: (-item[1], item[0]))
    for department, count in ordered:
        departments.add_row(escape(department) if department else "[dim](none)[/dim]", str(count))
    console.print(departments)
