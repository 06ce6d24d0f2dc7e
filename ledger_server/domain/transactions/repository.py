"""Repository protocol for ledger transactions."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from .models import Transaction


class TransactionRepository(Protocol):
    """Abstract repository interface for transaction persistence.

    Every read is scoped by ``session_id``.
    """

    async def add_transaction(
        self,
        *,
        title: str,
        amount: Decimal,
        session_id: str,
    ) -> Transaction:
        ...

    async def list_by_session(self, session_id: str) -> Sequence[Transaction]:
        ...

    async def get_scoped(self, session_id: str, transaction_id: str) -> Transaction | None:
        ...

    async def sum_by_session(self, session_id: str) -> Decimal:
        ...
