"""Database session dependency."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_server.infrastructure.database import Database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.database
    async for session in database.session():
        yield session


__all__ = ["get_db_session"]
