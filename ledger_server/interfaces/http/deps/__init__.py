"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .ledger import get_ledger_service, get_transaction_repository
from .session import optional_session_id, read_session_id, require_session_id

__all__ = [
    "get_db_session",
    "get_ledger_service",
    "get_transaction_repository",
    "optional_session_id",
    "read_session_id",
    "require_session_id",
]
