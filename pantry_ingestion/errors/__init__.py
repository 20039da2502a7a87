"""Error handling module."""
from pantry_ingestion.errors.exceptions import (
    PantryIngestionError,
    ParserError,
    ValidationError,
    DatabaseError,
    CategoryRegistryError,
)

__all__ = [
    "PantryIngestionError",
    "ParserError",
    "ValidationError",
    "DatabaseError",
    "CategoryRegistryError",
]
