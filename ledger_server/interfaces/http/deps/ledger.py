"""Ledger related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_server.domain.transactions import LedgerService
from ledger_server.infrastructure.database.repositories import SqlTransactionRepository

from .database import get_db_session


def get_transaction_repository(db: AsyncSession = Depends(get_db_session)) -> SqlTransactionRepository:
    return SqlTransactionRepository(db)


def get_ledger_service(
    repository: SqlTransactionRepository = Depends(get_transaction_repository),
) -> LedgerService:
    return LedgerService(repository)


__all__ = [
    "get_transaction_repository",
    "get_ledger_service",
]
