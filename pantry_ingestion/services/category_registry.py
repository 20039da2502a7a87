"""Immutable snapshot of stored grocery categories.

The registry is loaded once per import run and passed explicitly to the
classifier and importers instead of living in module state.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple
import uuid
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pantry_ingestion.db.models import GroceryCategory
from pantry_ingestion.errors.exceptions import CategoryRegistryError, DatabaseError

logger = structlog.get_logger(__name__)


class CategoryRegistry:
    """Read-only mapping of category name to persistent category id."""

    __slots__ = ("_ids",)

    def __init__(self, categories: Mapping[str, uuid.UUID]):
        self._ids = MappingProxyType(dict(categories))

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[uuid.UUID, str]]) -> "CategoryRegistry":
        """Build a registry from (id, name) rows. Later duplicates are ignored."""
        ids = {}
        for category_id, name in rows:
            ids.setdefault(name, category_id)
        return cls(ids)

    @property
    def names(self) -> frozenset:
        return frozenset(self._ids)

    def contains(self, name: str) -> bool:
        return name in self._ids

    def get(self, name: str) -> Optional[uuid.UUID]:
        return self._ids.get(name)

    def require(self, name: str) -> uuid.UUID:
        """Get the id for a category that must exist.

        Raises:
            CategoryRegistryError: If the category is not registered
        """
        category_id = self._ids.get(name)
        if category_id is None:
            raise CategoryRegistryError(name)
        return category_id

    def as_dict(self) -> dict:
        return dict(self._ids)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"<CategoryRegistry(categories={sorted(self._ids)})>"


async def load_category_registry(session: AsyncSession) -> CategoryRegistry:
    """Load the category registry from grocery_categories.

    Raises:
        DatabaseError: If the categories cannot be read
    """
    try:
        result = await session.execute(
            select(GroceryCategory.id, GroceryCategory.name)
        )
        registry = CategoryRegistry.from_rows(result.all())
    except Exception as e:
        logger.error(
            "load_category_registry_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise DatabaseError(f"Failed to load grocery categories: {e}") from e

    logger.debug("category_registry_loaded", count=len(registry))
    return registry
