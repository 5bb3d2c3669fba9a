"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ledger_store.infrastructure import settings as settings_module
from ledger_store.infrastructure.settings import LedgerSettings


def _clear_env(monkeypatch) -> None:
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: MagicMock())
    for name in ("LEDGER_DB_URL", "LEDGER_DB_FILE", "LEDGER_ECHO_SQL"):
        monkeypatch.delenv(name, raising=False)


def test_from_env_prefers_database_url(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite:///:memory:")
    monkeypatch.setenv("LEDGER_DB_FILE", "/ignored.db")
    monkeypatch.setenv("LEDGER_ECHO_SQL", "true")

    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings(
        db_url="sqlite:///:memory:",
        echo_sql=True,
    )


def test_from_env_uses_file_path_and_creates_directory(
    monkeypatch,
    tmp_path: Path,
) -> None:
    _clear_env(monkeypatch)
    db_file = tmp_path / "nested" / "ledger.db"
    monkeypatch.setenv("LEDGER_DB_FILE", str(db_file))

    settings = LedgerSettings.from_env()

    assert settings.db_url == f"sqlite:///{db_file.resolve()}"
    assert settings.echo_sql is False
    assert db_file.parent.exists()


def test_from_env_defaults_to_project_data_dir(
    monkeypatch,
    tmp_path: Path,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setattr(
        settings_module,
        "get_project_root",
        lambda: tmp_path,
    )

    settings = LedgerSettings.from_env()

    expected = (tmp_path / "data" / "financias.db").resolve()
    assert settings.db_url == f"sqlite:///{expected}"


def test_for_file_rejects_directory(monkeypatch, tmp_path: Path) -> None:
    _clear_env(monkeypatch)

    with pytest.raises(RuntimeError, match="is a directory"):
        LedgerSettings.for_file(tmp_path)
