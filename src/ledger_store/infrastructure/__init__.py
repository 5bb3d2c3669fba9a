"""Infrastructure adapters for the ledger store."""
