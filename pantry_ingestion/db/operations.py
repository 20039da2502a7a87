"""Database operations for the grocery import scripts."""
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from typing import Dict, List, Optional, Type
import uuid
import structlog

from pantry_ingestion.db.base import Base
from pantry_ingestion.db.models import (
    GroceryCategory,
    GroceryList,
    GroceryType,
    GroceryListItem,
)
from pantry_ingestion.errors.exceptions import DatabaseError

logger = structlog.get_logger(__name__)


async def get_grocery_type_by_name(
    session: AsyncSession,
    name: str,
) -> Optional[GroceryType]:
    """Find a grocery type by exact name.

    Raises:
        DatabaseError: If the query fails
    """
    try:
        result = await session.execute(
            select(GroceryType).where(GroceryType.name == name)
        )
        return result.scalar_one_or_none()
    except Exception as e:
        logger.error(
            "get_grocery_type_failed",
            name=name,
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to look up grocery type '{name}': {e}") from e


async def insert_grocery_type(
    session: AsyncSession,
    name: str,
    category_id: uuid.UUID,
) -> GroceryType:
    """Create a grocery type with no default store.

    Raises:
        DatabaseError: If the insert fails
    """
    try:
        grocery_type = GroceryType(
            name=name,
            category_id=category_id,
            default_store_id=None,
        )
        session.add(grocery_type)
        await session.flush()  # Flush to get the ID

        logger.debug(
            "grocery_type_inserted",
            grocery_type_id=str(grocery_type.id),
            name=name,
            category_id=str(category_id),
        )
        return grocery_type
    except Exception as e:
        logger.error(
            "insert_grocery_type_failed",
            name=name,
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to insert grocery type '{name}': {e}") from e


async def update_grocery_type_category(
    session: AsyncSession,
    grocery_type: GroceryType,
    category_id: uuid.UUID,
) -> GroceryType:
    """Move a grocery type to another category.

    Raises:
        DatabaseError: If the update fails
    """
    try:
        grocery_type.category_id = category_id
        session.add(grocery_type)
        await session.flush()

        logger.debug(
            "grocery_type_category_updated",
            grocery_type_id=str(grocery_type.id),
            name=grocery_type.name,
            category_id=str(category_id),
        )
        return grocery_type
    except Exception as e:
        logger.error(
            "update_grocery_type_failed",
            name=grocery_type.name,
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to update grocery type '{grocery_type.name}': {e}") from e


async def load_name_index(
    session: AsyncSession,
    model: Type[Base],
) -> Dict[str, uuid.UUID]:
    """Map lowercased, stripped names to ids for a table with a ``name`` column.

    Raises:
        DatabaseError: If the query fails
    """
    try:
        result = await session.execute(select(model.id, model.name))
        index: Dict[str, uuid.UUID] = {}
        for row_id, name in result.all():
            if name:
                index.setdefault(name.strip().lower(), row_id)
        return index
    except Exception as e:
        logger.error(
            "load_name_index_failed",
            table=model.__tablename__,
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to load {model.__tablename__}: {e}") from e


async def insert_grocery_list(session: AsyncSession, name: str) -> GroceryList:
    """Create an empty grocery list.

    Raises:
        DatabaseError: If the insert fails
    """
    try:
        grocery_list = GroceryList(name=name)
        session.add(grocery_list)
        await session.flush()

        logger.debug("grocery_list_inserted", grocery_list_id=str(grocery_list.id), name=name)
        return grocery_list
    except Exception as e:
        logger.error(
            "insert_grocery_list_failed",
            name=name,
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to insert grocery list '{name}': {e}") from e


async def insert_grocery_list_item(
    session: AsyncSession,
    list_id: uuid.UUID,
    grocery_type_id: uuid.UUID,
    quantity: Decimal,
    unit: str,
) -> GroceryListItem:
    """Add a grocery type to a list, not purchased and not in stock.

    Raises:
        DatabaseError: If the insert fails
    """
    try:
        item = GroceryListItem(
            list_id=list_id,
            grocery_type_id=grocery_type_id,
            quantity=quantity,
            unit=unit,
            is_purchased=False,
            is_in_stock=False,
        )
        session.add(item)
        await session.flush()
        return item
    except Exception as e:
        logger.error(
            "insert_grocery_list_item_failed",
            list_id=str(list_id),
            grocery_type_id=str(grocery_type_id),
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to insert grocery list item: {e}") from e


async def get_all_categories(session: AsyncSession) -> List[GroceryCategory]:
    """Load every grocery category.

    Raises:
        DatabaseError: If the query fails
    """
    try:
        result = await session.execute(select(GroceryCategory))
        return list(result.scalars().all())
    except Exception as e:
        logger.error(
            "get_all_categories_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to load grocery categories: {e}") from e


async def delete_category(session: AsyncSession, category_id: uuid.UUID) -> None:
    """Delete a grocery category by id.

    Raises:
        DatabaseError: If the delete fails (e.g. grocery types still reference it)
    """
    try:
        await session.execute(
            delete(GroceryCategory).where(GroceryCategory.id == category_id)
        )
        await session.flush()
    except Exception as e:
        raise DatabaseError(f"Failed to delete category {category_id}: {e}") from e


async def reassign_grocery_types(
    session: AsyncSession,
    from_category_id: uuid.UUID,
    to_category_id: uuid.UUID,
) -> int:
    """Move all grocery types from one category to another.

    Returns:
        Number of grocery types moved

    Raises:
        DatabaseError: If the update fails
    """
    try:
        result = await session.execute(
            update(GroceryType)
            .where(GroceryType.category_id == from_category_id)
            .values(category_id=to_category_id)
        )
        await session.flush()
        return result.rowcount or 0
    except Exception as e:
        logger.error(
            "reassign_grocery_types_failed",
            from_category_id=str(from_category_id),
            to_category_id=str(to_category_id),
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError(f"Failed to reassign grocery types: {e}") from e
