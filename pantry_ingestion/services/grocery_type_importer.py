"""Grocery type import: classify each name and upsert it into grocery_types.

For every row:
1. Classify the name against the curated rule table, restricted to the
   categories registered in the store
2. Resolve the category through the registry (unmatched -> Pantry)
3. Insert new names, move existing names whose category changed, and
   leave the rest untouched
"""
from typing import Any, Iterable, Optional
import uuid
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from pantry_ingestion.config import classification_settings
from pantry_ingestion.db.base import async_session_maker
from pantry_ingestion.db.operations import (
    get_grocery_type_by_name,
    insert_grocery_type,
    update_grocery_type_category,
)
from pantry_ingestion.errors.exceptions import DatabaseError
from pantry_ingestion.models.file_parser_config import RowKind
from pantry_ingestion.models.import_result import (
    GroceryTypeImportResult,
    GroceryTypeOutcome,
    ImportAction,
)
from pantry_ingestion.models.parsed_item import ParsedGroceryTypeRow
from pantry_ingestion.parsers import create_parser_instance, parser_type_for_path
from pantry_ingestion.services.category_registry import CategoryRegistry, load_category_registry
from pantry_ingestion.services.classification import CategoryClassifier

logger = structlog.get_logger(__name__)


class GroceryTypeImporter:
    """Imports grocery type names, assigning each a category.

    Attributes:
        classifier: Classifier holding the rule table and fallback label
        fallback_category: Stored category that unmatched names are filed under
    """

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        fallback_category: Optional[str] = None,
    ):
        self.classifier = classifier or CategoryClassifier()
        self.fallback_category = fallback_category or classification_settings.fallback_category

    async def run(
        self,
        rows: Iterable[ParsedGroceryTypeRow],
        session: Optional[AsyncSession] = None,
    ) -> GroceryTypeImportResult:
        """Import rows in one transaction.

        Args:
            rows: Parsed grocery type rows
            session: Optional database session (creates one if not provided)

        Returns:
            GroceryTypeImportResult with counts and per-row outcomes

        Raises:
            CategoryRegistryError: If the fallback category is not registered
            DatabaseError: If the category registry cannot be loaded
        """
        rows = list(rows)
        result = GroceryTypeImportResult()
        log = logger.bind(rows_count=len(rows))
        log.info("grocery_type_import_started")

        if session is None:
            async with async_session_maker() as session:
                async with session.begin():
                    await self._do_import(session, rows, result, log)
        else:
            await self._do_import(session, rows, result, log)

        log.info(
            "grocery_type_import_completed",
            inserted=result.inserted,
            updated=result.updated,
            unchanged=result.unchanged,
            failed=result.failed,
            fallback=result.fallback_count,
        )
        return result

    async def _do_import(
        self,
        session: AsyncSession,
        rows: list,
        result: GroceryTypeImportResult,
        log: Any,
    ) -> GroceryTypeImportResult:
        """Internal import implementation."""
        registry = await load_category_registry(session)
        fallback_id = registry.require(self.fallback_category)
        classifier = self.classifier.with_known_categories(registry.names)

        for row in rows:
            outcome = await self._import_row(
                session=session,
                name=row.name,
                classifier=classifier,
                registry=registry,
                fallback_id=fallback_id,
                log=log,
            )
            result.record(outcome)

        return result

    async def _import_row(
        self,
        session: AsyncSession,
        name: str,
        classifier: CategoryClassifier,
        registry: CategoryRegistry,
        fallback_id: uuid.UUID,
        log: Any,
    ) -> GroceryTypeOutcome:
        """Classify and upsert one grocery type."""
        classification = classifier.classify(name)
        if classification.is_fallback:
            category_id = fallback_id
        else:
            category_id = registry.require(classification.matched_category)

        outcome = GroceryTypeOutcome(
            name=name,
            category=classification.matched_category,
            action=ImportAction.UNCHANGED,
            used_fallback=classification.is_fallback,
        )

        try:
            async with session.begin_nested():
                existing = await get_grocery_type_by_name(session, name)
                if existing is None:
                    await insert_grocery_type(session, name, category_id)
                    outcome.action = ImportAction.INSERTED
                elif existing.category_id != category_id:
                    await update_grocery_type_category(session, existing, category_id)
                    outcome.action = ImportAction.UPDATED
        except DatabaseError as e:
            outcome.action = ImportAction.FAILED
            outcome.error = f"Error importing '{name}': {e.message}"
            log.warning("grocery_type_import_error", name=name, error=e.message)
            return outcome

        if outcome.action != ImportAction.UNCHANGED:
            log.info(
                f"grocery_type_{outcome.action.value}",
                name=name,
                category=classification.matched_category,
            )
        return outcome


async def import_grocery_types_file(
    file_path: str,
    sheet_name: Optional[str] = None,
    importer: Optional[GroceryTypeImporter] = None,
    session: Optional[AsyncSession] = None,
) -> GroceryTypeImportResult:
    """Parse a grocery types export (.xlsx or .csv) and import it.

    Raises:
        ParserError: If the file cannot be read
        ValidationError: If the file has no name column
        CategoryRegistryError: If the fallback category is not registered
    """
    parser_type = parser_type_for_path(file_path)
    parser = create_parser_instance(parser_type)
    config = {"file_path": file_path, "row_kind": RowKind.GROCERY_TYPES.value}
    if parser_type == "excel" and sheet_name:
        config["sheet_name"] = sheet_name

    rows = await parser.parse(config)
    logger.info("grocery_types_file_parsed", file_path=file_path, rows=len(rows))

    importer = importer or GroceryTypeImporter()
    return await importer.run(rows, session=session)
