from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from employee_records import reporter
from employee_records.config import get_settings
from employee_records.driver import ConsoleDriver
from employee_records.sample_data import seed_sample_data
from employee_records.store import RecordStore
from employee_records.utils.logging import configure_logging

app = typer.Typer(help="Employee Records console.")

SEED_OPTION = typer.Option(
    None,
    "--seed/--no-seed",
    help="Load the sample employees first (default from settings).",
)


def _build_store(seed: Optional[bool]) -> RecordStore:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    store = RecordStore()
    if settings.seed_sample_data if seed is None else seed:
        seed_sample_data(store)
    return store


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"seed_sample_data={settings.seed_sample_data} currency={settings.currency_symbol}"
    )


@app.command()
def interactive(seed: Optional[bool] = SEED_OPTION) -> None:
    """
    Run the numbered-menu session.
    """
    store = _build_store(seed)
    ConsoleDriver(store, currency=get_settings().currency_symbol).run()


@app.command("list")
def list_employees(seed: Optional[bool] = SEED_OPTION) -> None:
    """
    Print every employee in the store.
    """
    store = _build_store(seed)
    reporter.print_employees(Console(), store.list_all(), get_settings().currency_symbol)


@app.command()
def stats(seed: Optional[bool] = SEED_OPTION) -> None:
    """
    Print salary statistics and department headcounts.
    """
    store = _build_store(seed)
    reporter.print_statistics(Console(), store.statistics(), get_settings().currency_symbol)


@app.command()
def search(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name fragment (case-insensitive)."),
    department: Optional[str] = typer.Option(
        None, "--department", "-d", help="Exact department (case-insensitive)."
    ),
    seed: Optional[bool] = SEED_OPTION,
) -> None:
    """
    Search employees by name fragment or department.
    """
    if (name is None) == (department is None):
        typer.echo("Provide exactly one of --name or --department.", err=True)
        raise typer.Exit(code=2)

    store = _build_store(seed)
    currency = get_settings().currency_symbol
    if name is not None:
        reporter.print_search_results(
            Console(), store.find_by_name(name), f"name containing '{name}'", currency
        )
    else:
        reporter.print_search_results(
            Console(), store.find_by_department(department), f"department '{department}'", currency
        )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
