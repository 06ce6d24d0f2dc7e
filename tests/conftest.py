import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ledger_server.core.config import DatabaseSettings, Settings
from ledger_server.domain.transactions import Transaction
from ledger_server.main import create_app


class InMemoryTransactionRepository:
    """Repository double that records which storage calls were made."""

    def __init__(self):
        self.rows: list[Transaction] = []
        self.calls: list[str] = []

    async def add_transaction(self, *, title, amount, session_id):
        self.calls.append("add_transaction")
        transaction = Transaction(
            id=str(uuid.uuid4()),
            title=title,
            amount=amount,
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
        )
        self.rows.append(transaction)
        return transaction

    async def list_by_session(self, session_id):
        self.calls.append("list_by_session")
        return [row for row in self.rows if row.session_id == session_id]

    async def get_scoped(self, session_id, transaction_id):
        self.calls.append("get_scoped")
        for row in self.rows:
            if row.id == transaction_id and row.session_id == session_id:
                return row
        return None

    async def sum_by_session(self, session_id):
        self.calls.append("sum_by_session")
        return sum((row.amount for row in self.rows if row.session_id == session_id), Decimal(0))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"),
    )


@pytest.fixture
def fake_repository():
    return InMemoryTransactionRepository()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
