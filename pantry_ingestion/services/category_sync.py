"""Bring grocery_categories in line with the curated category list.

Sync steps:
1. Rename legacy categories (e.g. "Produce" -> "Fresh Produce"), keeping ids
2. Create missing curated categories and update sort orders
3. Delete categories not in the curated list; if grocery types still
   reference one, move them to "Other" first
"""
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from pantry_ingestion.db.base import async_session_maker
from pantry_ingestion.db.models import GroceryCategory
from pantry_ingestion.db.operations import (
    delete_category,
    get_all_categories,
    reassign_grocery_types,
)
from pantry_ingestion.errors.exceptions import DatabaseError
from pantry_ingestion.models.import_result import CategorySyncResult
from pantry_ingestion.services.classification.rules import (
    CURATED_CATEGORIES,
    LEGACY_CATEGORY_RENAMES,
)

logger = structlog.get_logger(__name__)

REASSIGN_CATEGORY = "Other"


class CategorySync:
    """Converges stored categories to a curated (name, sort_order) list."""

    def __init__(
        self,
        categories: Sequence[Tuple[str, int]] = CURATED_CATEGORIES,
        renames: Mapping[str, str] = LEGACY_CATEGORY_RENAMES,
        reassign_to: str = REASSIGN_CATEGORY,
    ):
        self.categories = list(categories)
        self.renames = dict(renames)
        self.reassign_to = reassign_to

    async def run(self, session: Optional[AsyncSession] = None) -> CategorySyncResult:
        """Sync categories in one transaction.

        Args:
            session: Optional database session (creates one if not provided)

        Raises:
            DatabaseError: If the current categories cannot be loaded
        """
        result = CategorySyncResult()
        log = logger.bind(curated_count=len(self.categories))
        log.info("category_sync_started")

        if session is None:
            async with async_session_maker() as session:
                async with session.begin():
                    await self._do_sync(session, result, log)
        else:
            await self._do_sync(session, result, log)

        log.info(
            "category_sync_completed",
            renamed=result.renamed,
            created=result.created,
            updated=result.updated,
            deleted=result.deleted,
            reassigned_types=result.reassigned_types,
            errors=len(result.errors),
        )
        return result

    async def _do_sync(
        self,
        session: AsyncSession,
        result: CategorySyncResult,
        log: Any,
    ) -> CategorySyncResult:
        """Internal sync implementation."""
        existing: Dict[str, GroceryCategory] = {
            c.name: c for c in await get_all_categories(session)
        }
        log.debug("existing_categories_loaded", count=len(existing))

        for old_name, new_name in self.renames.items():
            category = existing.get(old_name)
            if category is None or new_name in existing:
                continue
            category.name = new_name
            session.add(category)
            existing[new_name] = existing.pop(old_name)
            result.renamed.append(f"{old_name} -> {new_name}")
            log.info("category_renamed", old_name=old_name, new_name=new_name)

        for name, sort_order in self.categories:
            category = existing.get(name)
            if category is None:
                category = GroceryCategory(name=name, sort_order=sort_order)
                session.add(category)
                existing[name] = category
                result.created += 1
                log.info("category_created", name=name, sort_order=sort_order)
            elif category.sort_order != sort_order:
                category.sort_order = sort_order
                session.add(category)
                result.updated += 1
                log.debug("category_sort_order_updated", name=name, sort_order=sort_order)

        await session.flush()

        curated_names = {name for name, _ in self.categories}
        for name, category in list(existing.items()):
            if name in curated_names:
                continue
            await self._remove_category(session, category, existing, result, log)

        return result

    async def _remove_category(
        self,
        session: AsyncSession,
        category: GroceryCategory,
        existing: Dict[str, GroceryCategory],
        result: CategorySyncResult,
        log: Any,
    ) -> None:
        """Delete an unused category, reassigning its grocery types if needed."""
        try:
            async with session.begin_nested():
                await delete_category(session, category.id)
            result.deleted += 1
            log.info("category_deleted", name=category.name)
            return
        except DatabaseError as e:
            log.warning(
                "category_delete_blocked",
                name=category.name,
                error=e.message,
            )

        target = existing.get(self.reassign_to)
        if target is None:
            error_msg = (
                f"Could not delete '{category.name}' and no '{self.reassign_to}' "
                f"category exists to reassign its grocery types"
            )
            result.errors.append(error_msg)
            log.error("category_reassign_target_missing", name=category.name)
            return

        try:
            async with session.begin_nested():
                moved = await reassign_grocery_types(session, category.id, target.id)
                await delete_category(session, category.id)
        except DatabaseError as e:
            result.errors.append(f"Could not delete '{category.name}': {e.message}")
            log.error("category_delete_failed", name=category.name, error=e.message)
            return

        result.reassigned_types += moved
        result.deleted += 1
        log.info(
            "category_deleted_after_reassign",
            name=category.name,
            reassigned_to=self.reassign_to,
            grocery_types=moved,
        )
