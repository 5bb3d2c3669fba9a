"""Database ports for the ledger store.

This module defines the application-layer protocol for accessing the ledger
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the ledger store."""

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger file.
        """

    def dispose(self) -> None:
        """Release pooled connections held by the engine."""


__all__ = ["DatabaseEnginePort"]
