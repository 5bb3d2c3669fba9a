"""Use case to create the ledger schema and seed first-run data.

Running it repeatedly is safe: tables are created only when missing, the
config row only when absent, and default accounts only into an empty store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ledger_store.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_store.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class InitializeLedgerResult:
    """Result of a ledger initialization run.

    Attributes:
        config_seeded: Whether the default config row was inserted.
        accounts_seeded: Number of default accounts inserted.
    """

    config_seeded: bool
    accounts_seeded: int


class InitializeLedgerUseCase:
    """Ensure the ledger tables exist and hold their default rows."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port persisting ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current local time.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock

    def run(self) -> InitializeLedgerResult:
        """Execute the initialization.

        Returns:
            InitializeLedgerResult: What was seeded during this run.
        """
        self._repository.ensure_schema()
        config_seeded, accounts_seeded = self._repository.seed_defaults(
            self._clock()
        )
        if config_seeded:
            self._logger.info("Seeded default income config")
        if accounts_seeded:
            self._logger.info(f"Seeded {accounts_seeded} default accounts")
        self._logger.info("Ledger database initialized")
        return InitializeLedgerResult(
            config_seeded=config_seeded,
            accounts_seeded=accounts_seeded,
        )


__all__ = ["InitializeLedgerUseCase", "InitializeLedgerResult"]
