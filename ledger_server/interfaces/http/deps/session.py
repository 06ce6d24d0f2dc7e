"""Session cookie dependencies.

The ``sessionId`` cookie is the only identity the ledger knows about. Its value
scopes every read, so a malformed value is treated as if no cookie was sent.
"""

from fastapi import HTTPException, Request, status

from ledger_server.core.config import Settings
from ledger_server.domain.transactions import parse_uuid


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def read_session_id(request: Request) -> str | None:
    cookie_name = _settings(request).session_cookie_name
    return parse_uuid(request.cookies.get(cookie_name))


async def optional_session_id(request: Request) -> str | None:
    return read_session_id(request)


async def require_session_id(request: Request) -> str:
    session_id = read_session_id(request)
    if session_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized.")
    return session_id


__all__ = [
    "optional_session_id",
    "read_session_id",
    "require_session_id",
]
