"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from ledger_store.infrastructure.logging.logger import get_app_logger
from ledger_store.utils.utils import get_project_root


DEFAULT_DB_FILENAME = "financias.db"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger database.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        echo_sql: Whether SQLAlchemy should log emitted SQL.
    """

    db_url: str
    echo_sql: bool = False

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        ``LEDGER_DB_URL`` wins over ``LEDGER_DB_FILE``; without either, the
        store lives in ``data/financias.db`` under the project root.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        echo_sql = os.getenv("LEDGER_ECHO_SQL", "").strip().lower() in _TRUTHY
        raw_url = os.getenv("LEDGER_DB_URL", "").strip()
        if raw_url:
            return cls(db_url=raw_url, echo_sql=echo_sql)
        raw_file = os.getenv("LEDGER_DB_FILE", "").strip()
        path = (
            Path(raw_file)
            if raw_file
            else get_project_root() / "data" / DEFAULT_DB_FILENAME
        )
        return cls.for_file(path, echo_sql=echo_sql)

    @classmethod
    def for_file(
        cls,
        path: Path | str,
        echo_sql: bool = False,
    ) -> "LedgerSettings":
        """Build settings for a SQLite file, creating its directory.

        Args:
            path: Filesystem path to the SQLite database file.
            echo_sql: Whether SQLAlchemy should log emitted SQL.

        Returns:
            LedgerSettings: Settings pointing at the resolved file.
        """
        resolved = cls._normalize_path(path)
        return cls(db_url=f"sqlite:///{resolved}", echo_sql=echo_sql)

    @staticmethod
    def _normalize_path(raw_path: Path | str) -> Path:
        path = Path(raw_path).expanduser().resolve()
        if path.is_dir():
            raise RuntimeError(f"Ledger database path is a directory: {path}")
        if not path.parent.exists():
            get_app_logger().info(f"Creating ledger directory {path.parent}")
            path.parent.mkdir(parents=True, exist_ok=True)
        return path


__all__ = ["LedgerSettings", "DEFAULT_DB_FILENAME"]
