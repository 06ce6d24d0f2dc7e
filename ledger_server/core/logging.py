"""Logging setup shared by the API server and the migration scripts."""

from __future__ import annotations

import logging

from ledger_server.core.config import Settings

_configured = False


def configure_logging(settings: Settings) -> None:
    """Apply the configured level and format to the root logger once."""
    global _configured
    level = logging.DEBUG if settings.debug else settings.logging.level.upper()
    if _configured:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(level=level, format=settings.logging.format)
    _configured = True


__all__ = ["configure_logging"]
