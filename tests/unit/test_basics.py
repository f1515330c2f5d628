from __future__ import annotations

from employee_records import config
from employee_records.sample_data import SAMPLE_EMPLOYEES, seed_sample_data
from employee_records.store import RecordStore

EXPECTED_SAMPLE_COUNT = 5


def test_get_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "SEED_SAMPLE_DATA", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    settings = config.Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.seed_sample_data is True
    assert settings.currency_symbol == "$"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("CURRENCY_SYMBOL", "EUR")
    settings = config.get_settings()
    assert settings.seed_sample_data is False
    assert settings.currency_symbol == "EUR"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_seed_sample_data_assigns_sequential_ids():
    store = RecordStore()
    ids = seed_sample_data(store)
    assert ids == [1, 2, 3, 4, 5]
    assert [emp.name for emp in store.list_all()] == [s.name for s in SAMPLE_EMPLOYEES]


def test_seeding_twice_skips_existing_emails():
    store = RecordStore()
    seed_sample_data(store)
    assert seed_sample_data(store) == []
    assert len(store) == EXPECTED_SAMPLE_COUNT
