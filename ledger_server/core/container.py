"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ledger_server.core.config import Settings
from ledger_server.infrastructure.database import Database

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        return cls(settings=settings, database=Database.from_settings(settings))

    async def startup(self) -> None:
        """Prepare infrastructure (database schema, etc.) before serving requests."""
        if self.settings.database.create_tables:
            await self.database.create_all()
        logger.info("Ledger storage ready (%s)", self.database.engine.url.render_as_string(hide_password=True))

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
