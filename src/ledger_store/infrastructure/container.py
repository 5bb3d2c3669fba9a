"""Composition root for wiring infrastructure adapters."""

from datetime import datetime
from typing import Callable

from ledger_store.application.ledger_store import LedgerStore
from ledger_store.application.ports.database import DatabaseEnginePort
from ledger_store.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_store.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_store.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from ledger_store.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledger_store.infrastructure.settings import LedgerSettings


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(settings)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the SQLAlchemy ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> LedgerStore:
    """Return a ledger store wired to the configured database."""
    return LedgerStore(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
        clock=clock,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_ledger_store",
]
