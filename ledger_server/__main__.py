"""Run the API server with uvicorn: ``python -m ledger_server``."""

import uvicorn

from ledger_server.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ledger_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
