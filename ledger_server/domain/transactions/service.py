"""Domain service for the session-scoped ledger."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from decimal import Decimal
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import InvalidTransactionError
from .models import (
    CreatedTransaction,
    LedgerSummary,
    Transaction,
    TransactionCreateInput,
    generate_session_id,
    signed_amount,
)
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


class LedgerService:
    """Encapsulates the ledger use cases.

    The session id is a bearer capability: whoever presents it can read and
    append to the ledger it scopes. Lookups outside the caller's session
    behave exactly like lookups of missing rows.
    """

    def __init__(
        self,
        repository: TransactionRepository,
        session_id_factory: Callable[[], str] = generate_session_id,
    ) -> None:
        self._repository = repository
        self._session_id_factory = session_id_factory

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LedgerService":
        # The SQL repository imports the domain models, so bind it lazily.
        from ledger_server.infrastructure.database.repositories import SqlTransactionRepository

        return cls(SqlTransactionRepository(session))

    async def create_transaction(
        self,
        payload: TransactionCreateInput,
        session_id: str | None = None,
    ) -> CreatedTransaction:
        title = payload.title
        if not title or not title.strip():
            raise InvalidTransactionError("title must not be empty")
        amount = Decimal(str(payload.amount))
        if not amount.is_finite() or amount < 0:
            raise InvalidTransactionError(f"amount must be a non-negative number: {payload.amount}")

        is_new_session = session_id is None
        if is_new_session:
            session_id = self._session_id_factory()
            logger.info("Issued new ledger session")

        transaction = await self._repository.add_transaction(
            title=title,
            amount=signed_amount(amount, payload.type),
            session_id=session_id,
        )
        logger.debug("Recorded %s transaction %s", payload.type.value, transaction.id)
        return CreatedTransaction(
            transaction=transaction,
            session_id=session_id,
            is_new_session=is_new_session,
        )

    async def list_transactions(self, session_id: str) -> Sequence[Transaction]:
        return await self._repository.list_by_session(session_id)

    async def get_transaction(self, session_id: str, transaction_id: uuid.UUID | str) -> Transaction | None:
        return await self._repository.get_scoped(session_id, str(transaction_id))

    async def summarize(self, session_id: str) -> LedgerSummary:
        total = await self._repository.sum_by_session(session_id)
        return LedgerSummary(amount=total)
