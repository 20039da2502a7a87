"""Grocery list item import.

Each row names a grocery list and a grocery type. Both are looked up by
case-insensitive name; rows referring to an unknown list or type are
skipped, never created on the fly.
"""
from typing import Any, Dict, Iterable, List, Optional
import uuid
import structlog
from rapidfuzz import fuzz, process
from sqlalchemy.ext.asyncio import AsyncSession

from pantry_ingestion.db.base import async_session_maker
from pantry_ingestion.db.models import GroceryList, GroceryType
from pantry_ingestion.db.operations import insert_grocery_list_item, load_name_index
from pantry_ingestion.errors.exceptions import DatabaseError
from pantry_ingestion.models.file_parser_config import RowKind
from pantry_ingestion.models.import_result import GroceryListItemImportResult
from pantry_ingestion.models.parsed_item import ParsedGroceryListItemRow
from pantry_ingestion.parsers import create_parser_instance, parser_type_for_path

logger = structlog.get_logger(__name__)

# Minimum rapidfuzz WRatio for a "did you mean" suggestion
SUGGESTION_CUTOFF = 85.0


def suggest_name(name: str, known_names: Iterable[str]) -> Optional[str]:
    """Return the closest known name, or None if nothing is close."""
    match = process.extractOne(
        name.strip().lower(),
        list(known_names),
        scorer=fuzz.WRatio,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return match[0] if match else None


class GroceryListItemImporter:
    """Adds grocery types to existing grocery lists."""

    async def run(
        self,
        rows: Iterable[ParsedGroceryListItemRow],
        session: Optional[AsyncSession] = None,
        invalid_rows: int = 0,
    ) -> GroceryListItemImportResult:
        """Import rows in one transaction.

        Args:
            rows: Parsed list item rows
            session: Optional database session (creates one if not provided)
            invalid_rows: Rows the parser rejected, counted as skipped

        Raises:
            DatabaseError: If the list or type lookups cannot be loaded
        """
        rows = list(rows)
        result = GroceryListItemImportResult(skipped=invalid_rows)
        log = logger.bind(rows_count=len(rows))
        log.info("grocery_list_item_import_started")

        if session is None:
            async with async_session_maker() as session:
                async with session.begin():
                    await self._do_import(session, rows, result, log)
        else:
            await self._do_import(session, rows, result, log)

        log.info(
            "grocery_list_item_import_completed",
            inserted=result.inserted,
            skipped=result.skipped,
            errors=len(result.errors),
        )
        return result

    async def _do_import(
        self,
        session: AsyncSession,
        rows: List[ParsedGroceryListItemRow],
        result: GroceryListItemImportResult,
        log: Any,
    ) -> GroceryListItemImportResult:
        """Internal import implementation."""
        list_ids: Dict[str, uuid.UUID] = await load_name_index(session, GroceryList)
        type_ids: Dict[str, uuid.UUID] = await load_name_index(session, GroceryType)
        log.debug("reference_data_loaded", lists=len(list_ids), types=len(type_ids))

        for row in rows:
            list_id = list_ids.get(row.list_name.lower())
            type_id = type_ids.get(row.type_name.lower())

            if list_id is None:
                log.warning(
                    "grocery_list_not_found",
                    row_number=row.row_number,
                    list_name=row.list_name,
                )
                result.skipped += 1
                continue

            if type_id is None:
                log.warning(
                    "grocery_type_not_found",
                    row_number=row.row_number,
                    type_name=row.type_name,
                    suggestion=suggest_name(row.type_name, type_ids.keys()),
                )
                result.skipped += 1
                continue

            try:
                async with session.begin_nested():
                    await insert_grocery_list_item(
                        session,
                        list_id=list_id,
                        grocery_type_id=type_id,
                        quantity=row.quantity,
                        unit=row.unit,
                    )
                result.inserted += 1
            except DatabaseError as e:
                error_msg = f"Error inserting {row.type_name} -> {row.list_name}: {e.message}"
                result.errors.append(error_msg)
                result.skipped += 1
                log.warning(
                    "grocery_list_item_insert_failed",
                    row_number=row.row_number,
                    error=e.message,
                )

        return result


async def import_grocery_list_items_file(
    file_path: str,
    sheet_name: Optional[str] = None,
    session: Optional[AsyncSession] = None,
) -> GroceryListItemImportResult:
    """Parse a grocery list items export (.xlsx or .csv) and import it.

    Raises:
        ParserError: If the file cannot be read
        ValidationError: If the file lacks the list or type column
    """
    parser_type = parser_type_for_path(file_path)
    parser = create_parser_instance(parser_type)
    config = {"file_path": file_path, "row_kind": RowKind.GROCERY_LIST_ITEMS.value}
    if parser_type == "excel" and sheet_name:
        config["sheet_name"] = sheet_name

    rows = await parser.parse(config)
    logger.info(
        "grocery_list_items_file_parsed",
        file_path=file_path,
        rows=len(rows),
        rejected=len(parser.rejected_rows),
    )
    return await GroceryListItemImporter().run(
        rows, session=session, invalid_rows=len(parser.rejected_rows)
    )
