"""Ledger domain specific exceptions."""


class LedgerError(Exception):
    """Base class for ledger domain errors."""


class InvalidTransactionError(LedgerError):
    """Raised when a transaction would violate the ledger invariants."""
