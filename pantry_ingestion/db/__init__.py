"""Database module."""
from pantry_ingestion.db.base import (
    Base,
    UUIDMixin,
    engine,
    async_session_maker,
    get_session,
)

__all__ = [
    "Base",
    "UUIDMixin",
    "engine",
    "async_session_maker",
    "get_session",
]
