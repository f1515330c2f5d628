"""
Interactive console session over a `RecordStore`.

The driver owns all prompting, parsing and rendering. It talks to the store
synchronously and turns `StoreResult` failures into "Error: ..." lines; it
never exits on malformed input. End of input ends the session like choosing
Exit.

Usage:
    from employee_records.driver import ConsoleDriver
    from employee_records.store import RecordStore

    ConsoleDriver(RecordStore()).run()
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape

from employee_records import reporter
from employee_records.domain.models import EmployeeUpdate
from employee_records.domain.results import StoreResult
from employee_records.parsing import (
    ParseError,
    is_affirmative,
    parse_date,
    parse_int,
    parse_salary,
)
from employee_records.store import RecordStore
from employee_records.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")

MENU_ITEMS = (
    "Add Employee",
    "Update Employee",
    "Delete Employee",
    "Find Employee by ID",
    "Display All Employees",
    "Search Employees",
    "Display Statistics",
    "Exit",
)
EXIT_CHOICE = len(MENU_ITEMS)


class ConsoleDriver:
    """
    Numbered-menu front end for the record store.

    Parameters
    ----------
    store : RecordStore
        Store the session reads and mutates.
    console : Console, optional
        rich console used for all output. Defaults to stdout.
    stream : TextIO, optional
        Where input lines come from. Defaults to the builtin `input()`.
    currency : str
        Symbol used when rendering salaries.
    """

    def __init__(
        self,
        store: RecordStore,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        currency: str = "$",
    ) -> None:
        self.store = store
        self.console = console or Console()
        self._stream = stream
        self._currency = currency
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_employee,
            2: self.update_employee,
            3: self.delete_employee,
            4: self.find_employee,
            5: self.display_all,
            6: self.search_employees,
            7: self.display_statistics,
        }

    # ----- input helpers -------------------------------------------------

    def _read(self, prompt: str) -> str:
        line = self.console.input(prompt, stream=self._stream)
        if self._stream is not None and line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _prompt_parsed(self, prompt: str, parser: Callable[[str], T], retry_message: str) -> T:
        while True:
            raw = self._read(prompt)
            try:
                return parser(raw)
            except ParseError:
                self.console.print(f"[red]{retry_message}[/red]")

    def _prompt_int(self, prompt: str) -> int:
        return self._prompt_parsed(prompt, parse_int, "Please enter a valid number.")

    def _prompt_optional(
        self, prompt: str, parser: Callable[[str], T], invalid_message: str
    ) -> Optional[T]:
        raw = self._read(prompt)
        if not raw.strip():
            return None
        try:
            return parser(raw)
        except ParseError:
            self.console.print(f"[yellow]{invalid_message}[/yellow]")
            return None

    def _report(self, result: StoreResult, success_message: str) -> bool:
        if result.ok:
            self.console.print(f"[green]{escape(success_message)}[/green]")
            return True
        self.console.print(f"[red]Error: {escape(str(result.error))}[/red]")
        return False

    # ----- menu actions --------------------------------------------------

    def add_employee(self) -> None:
        self.console.print("\n[bold]=== ADD EMPLOYEE ===[/bold]")
        name = self._read("Enter name: ")
        email = self._read("Enter email: ")
        department = self._read("Enter department: ")
        position = self._read("Enter position: ")
        salary = self._prompt_parsed(
            "Enter salary: ", parse_salary, "Please enter a valid number."
        )
        hire_date = self._prompt_parsed(
            "Enter hire date (YYYY-MM-DD): ",
            parse_date,
            "Please enter date in YYYY-MM-DD format.",
        )

        result = self.store.add(name, email, department, position, salary, hire_date)
        self._report(result, f"Employee added successfully with ID: {result.value}")

    def update_employee(self) -> None:
        self.console.print("\n[bold]=== UPDATE EMPLOYEE ===[/bold]")
        employee_id = self._prompt_int("Enter employee ID to update: ")
        current = self.store.find_by_id(employee_id)
        if current is None:
            self.console.print("[yellow]Employee not found.[/yellow]")
            return

        self.console.print("Current employee details:")
        reporter.print_employee(self.console, current, self._currency)
        self.console.print("\nEnter new values (press Enter to keep current value):")

        patch = EmployeeUpdate(
            name=self._read(f"Name \\[{escape(current.name)}]: ") or None,
            email=self._read(f"Email \\[{escape(current.email)}]: ") or None,
            department=self._read(f"Department \\[{escape(current.department)}]: ") or None,
            position=self._read(f"Position \\[{escape(current.position)}]: ") or None,
            salary=self._prompt_optional(
                f"Salary \\[{current.salary}]: ",
                parse_salary,
                "Invalid salary format. Keeping current value.",
            ),
            hire_date=self._prompt_optional(
                f"Hire Date \\[{current.hire_date.isoformat()}] (YYYY-MM-DD): ",
                parse_date,
                "Invalid date format. Keeping current value.",
            ),
        )
        self._report(self.store.update(employee_id, patch), "Employee updated successfully.")

    def delete_employee(self) -> None:
        self.console.print("\n[bold]=== DELETE EMPLOYEE ===[/bold]")
        employee_id = self._prompt_int("Enter employee ID to delete: ")
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            self.console.print("[yellow]Employee not found.[/yellow]")
            return

        self.console.print("Employee to delete:")
        reporter.print_employee(self.console, employee, self._currency)
        if not is_affirmative(self._read("Are you sure? (y/N): ")):
            self.console.print("Deletion cancelled.")
            return

        result = self.store.delete(employee_id)
        self._report(result, f"Employee deleted successfully: {employee.name}")

    def find_employee(self) -> None:
        self.console.print("\n[bold]=== FIND EMPLOYEE ===[/bold]")
        employee = self.store.find_by_id(self._prompt_int("Enter employee ID: "))
        if employee is None:
            self.console.print("[yellow]Employee not found.[/yellow]")
            return
        self.console.print("Employee found:")
        reporter.print_employee(self.console, employee, self._currency)

    def display_all(self) -> None:
        reporter.print_employees(self.console, self.store.list_all(), self._currency)

    def search_employees(self) -> None:
        self.console.print("\n[bold]=== SEARCH EMPLOYEES ===[/bold]")
        self.console.print("1. Search by name")
        self.console.print("2. Search by department")
        choice = self._prompt_int("Enter your choice: ")

        if choice == 1:
            name = self._read("Enter name to search: ")
            reporter.print_search_results(
                self.console,
                self.store.find_by_name(name),
                f"name containing '{name}'",
                self._currency,
            )
        elif choice == 2:
            department = self._read("Enter department: ")
            reporter.print_search_results(
                self.console,
                self.store.find_by_department(department),
                f"department '{department}'",
                self._currency,
            )
        else:
            self.console.print("[red]Invalid choice.[/red]")

    def display_statistics(self) -> None:
        reporter.print_statistics(self.console, self.store.statistics(), self._currency)

    # ----- main loop -----------------------------------------------------

    def print_menu(self) -> None:
        self.console.print("\n[bold]=== MAIN MENU ===[/bold]")
        for number, label in enumerate(MENU_ITEMS, start=1):
            self.console.print(f"{number}. {label}")

    def run(self) -> None:
        """
        Loop over the main menu until Exit is chosen or input runs out.
        """
        self.console.print("Welcome to Employee Management System")
        self.console.print("=====================================")
        log.info("Session started", extra={"employees": len(self.store)})

        try:
            while True:
                self.print_menu()
                choice = self._prompt_int("Enter your choice: ")
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self.console.print("[red]Invalid choice. Please try again.[/red]")
                    continue
                action()
        except EOFError:
            self.console.print()
            log.info("Input closed; ending session")

        self.console.print("Thank you for using Employee Management System!")
        log.info("Session ended", extra={"employees": len(self.store)})


__all__ = ["ConsoleDriver", "MENU_ITEMS"]
