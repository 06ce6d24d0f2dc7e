"""Ledger domain services and models."""

from .models import (
    CreatedTransaction,
    LedgerSummary,
    Transaction,
    TransactionCreateInput,
    TransactionType,
    generate_session_id,
    parse_uuid,
    signed_amount,
)
from .service import LedgerService
from .exceptions import LedgerError, InvalidTransactionError

__all__ = [
    "CreatedTransaction",
    "LedgerSummary",
    "Transaction",
    "TransactionCreateInput",
    "TransactionType",
    "LedgerService",
    "LedgerError",
    "InvalidTransactionError",
    "generate_session_id",
    "parse_uuid",
    "signed_amount",
]
