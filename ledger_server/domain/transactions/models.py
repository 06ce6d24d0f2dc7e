"""Domain models for ledger transactions."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


class TransactionType(str, enum.Enum):
    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(slots=True)
class Transaction:
    id: str
    title: str
    amount: Decimal
    session_id: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class TransactionCreateInput:
    title: str
    amount: Decimal
    type: TransactionType


@dataclass(slots=True)
class CreatedTransaction:
    transaction: Transaction
    session_id: str
    is_new_session: bool


@dataclass(slots=True)
class LedgerSummary:
    amount: Decimal


def signed_amount(amount: Decimal, type: TransactionType) -> Decimal:
    """Fold the transaction type into the sign of the stored amount."""
    value = amount if type is TransactionType.CREDIT else -amount
    if value == 0:
        return Decimal(0)
    return value


def generate_session_id() -> str:
    return str(uuid.uuid4())


def parse_uuid(value: object) -> str | None:
    """Return the canonical string form of ``value`` or ``None`` if it is not a UUID."""
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str) or not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None
