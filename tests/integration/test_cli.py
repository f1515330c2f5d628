from __future__ import annotations

import pytest
from typer.testing import CliRunner

from employee_records import main as cli
from employee_records.main import app

runner = CliRunner()
SEEDED_ENV = {"SEED_SAMPLE_DATA": "true", "LOG_LEVEL": "WARNING", "LOG_JSON": "false"}


def test_info_shows_settings():
    result = runner.invoke(app, ["info"], env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "seed_sample_data=True" in result.output


def test_list_prints_seeded_employees():
    result = runner.invoke(app, ["list"], env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "Total employees: 5" in result.output


def test_stats_prints_aggregates():
    result = runner.invoke(app, ["stats"], env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "$69,000.00" in result.output


def test_stats_without_seed_reports_empty_store():
    result = runner.invoke(app, ["stats", "--no-seed"], env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "No employees to analyze." in result.output


def test_search_by_name():
    result = runner.invoke(app, ["search", "--name", "jo"], env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "Total found: 2" in result.output


def test_search_requires_exactly_one_criterion():
    result = runner.invoke(app, ["search"], env=SEEDED_ENV)
    assert result.exit_code == 2


def test_interactive_session_exits_on_choice_eight():
    result = runner.invoke(app, ["interactive"], input="5\n8\n", env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "Total employees: 5" in result.output
    assert "Thank you for using Employee Management System!" in result.output


def test_interactive_session_survives_end_of_input():
    result = runner.invoke(app, ["interactive", "--no-seed"], input="", env=SEEDED_ENV)
    assert result.exit_code == 0
    assert "Thank you for using Employee Management System!" in result.output


def test_main_exits_130_on_ctrl_c(monkeypatch, capsys):
    def _interrupted() -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "app", _interrupted)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 130
    assert "Cancelled by user." in capsys.readouterr().err
