"""Database infrastructure for the ledger store.

This module creates the SQLAlchemy engine connected to the local ledger
database. It belongs to the infrastructure layer because it deals with the
storage engine (a SQLite file).
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from ledger_store.application.ports.database import DatabaseEnginePort
from ledger_store.infrastructure.settings import LedgerSettings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for each new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(db_url: str, echo: bool = False) -> Engine:
    """Create a configured SQLAlchemy engine for the ledger database.

    Args:
        db_url: Fully qualified database URL.
        echo: Whether to log emitted SQL.

    Returns:
        Engine: A SQLAlchemy engine; SQLite engines enforce foreign keys so
        account deletion cascades to transactions.
    """
    engine = create_engine(db_url, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning one SQLAlchemy engine.

    Settings are resolved when the adapter is built. The engine is created
    on first use and released by ``dispose``, so each store instance has an
    explicit lifecycle instead of a process-wide handle.
    """

    def __init__(self, settings: LedgerSettings | None = None) -> None:
        """Initialize the adapter.

        Args:
            settings: Optional settings; read from the environment when None.

        Raises:
            RuntimeError: If the environment points at an unusable database
                path.
        """
        self._settings = settings or LedgerSettings.from_env()
        self._engine: Engine | None = None

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: Lazily initialized engine connected to the ledger file.
        """
        if self._engine is None:
            self._engine = _create_engine(
                self._settings.db_url,
                echo=self._settings.echo_sql,
            )
        return self._engine

    def dispose(self) -> None:
        """Dispose of the engine; a later call reopens it."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
