"""Shared fixtures for ledger store tests."""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ledger_store.application.ledger_store import LedgerStore
from ledger_store.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_store.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from ledger_store.infrastructure.settings import LedgerSettings


class FakeClock:
    """Callable clock whose current time tests can move."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 15, 10, 30, 0))


@pytest.fixture
def db_port(tmp_path: Path):
    adapter = SqlAlchemyDatabaseEngineAdapter(
        LedgerSettings(db_url=f"sqlite:///{tmp_path / 'ledger.db'}")
    )
    yield adapter
    adapter.dispose()


@pytest.fixture
def repository(db_port) -> SqlAlchemyLedgerRepository:
    repo = SqlAlchemyLedgerRepository(db_port)
    repo.ensure_schema()
    return repo


@pytest.fixture
def app_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(db_port, clock, app_logger) -> LedgerStore:
    ledger = LedgerStore(
        SqlAlchemyLedgerRepository(db_port),
        logger=app_logger,
        usage_logger=MagicMock(),
        clock=clock,
    )
    assert ledger.init_database()
    yield ledger
    ledger.close()
