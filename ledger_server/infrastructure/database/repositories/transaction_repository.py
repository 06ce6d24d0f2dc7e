"""SQLAlchemy implementation of the transaction repository."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_server.domain.transactions.models import Transaction
from ledger_server.infrastructure.database.models import Transaction as TransactionModel


class SqlTransactionRepository:
    """Transaction repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_transaction(
        self,
        *,
        title: str,
        amount: Decimal,
        session_id: str,
    ) -> Transaction:
        model = TransactionModel(
            title=title,
            amount=amount,
            session_id=session_id,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def list_by_session(self, session_id: str) -> Sequence[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.session_id == session_id)
            .order_by(TransactionModel.created_at.asc(), TransactionModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_scoped(self, session_id: str, transaction_id: str) -> Transaction | None:
        stmt = select(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.session_id == session_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def sum_by_session(self, session_id: str) -> Decimal:
        stmt = select(func.coalesce(func.sum(TransactionModel.amount), 0)).where(
            TransactionModel.session_id == session_id
        )
        result = await self.session.execute(stmt)
        total = result.scalar_one()
        return total if isinstance(total, Decimal) else Decimal(str(total))

    @staticmethod
    def _as_utc(value: datetime | None) -> datetime | None:
        # SQLite drops the offset; rows are always written in UTC.
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @classmethod
    def _to_domain(cls, model: TransactionModel) -> Transaction:
        amount = model.amount if isinstance(model.amount, Decimal) else Decimal(str(model.amount))
        return Transaction(
            id=model.id,
            title=model.title,
            amount=amount,
            session_id=model.session_id,
            created_at=cls._as_utc(model.created_at),
        )
