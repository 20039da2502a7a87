"""Grocery list import: make sure every list named in the export exists.

Lists are matched by case-insensitive name. Existing lists are left as
they are; missing ones are created empty.
"""
from typing import Any, Dict, Iterable, List, Optional
import uuid
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from pantry_ingestion.db.base import async_session_maker
from pantry_ingestion.db.models import GroceryList
from pantry_ingestion.db.operations import insert_grocery_list, load_name_index
from pantry_ingestion.errors.exceptions import DatabaseError
from pantry_ingestion.models.file_parser_config import RowKind
from pantry_ingestion.models.import_result import GroceryListImportResult
from pantry_ingestion.models.parsed_item import ParsedGroceryListRow
from pantry_ingestion.parsers import create_parser_instance, parser_type_for_path

logger = structlog.get_logger(__name__)


class GroceryListImporter:
    """Creates grocery lists that are not in the store yet."""

    async def run(
        self,
        rows: Iterable[ParsedGroceryListRow],
        session: Optional[AsyncSession] = None,
        invalid_rows: int = 0,
    ) -> GroceryListImportResult:
        """Import rows in one transaction.

        Args:
            rows: Parsed grocery list rows
            session: Optional database session (creates one if not provided)
            invalid_rows: Rows the parser rejected, counted as skipped

        Raises:
            DatabaseError: If the existing lists cannot be loaded
        """
        rows = list(rows)
        result = GroceryListImportResult(skipped=invalid_rows)
        log = logger.bind(rows_count=len(rows))
        log.info("grocery_list_import_started")

        if session is None:
            async with async_session_maker() as session:
                async with session.begin():
                    await self._do_import(session, rows, result, log)
        else:
            await self._do_import(session, rows, result, log)

        log.info(
            "grocery_list_import_completed",
            inserted=result.inserted,
            existing=result.existing,
            skipped=result.skipped,
            failed=result.failed,
        )
        return result

    async def _do_import(
        self,
        session: AsyncSession,
        rows: List[ParsedGroceryListRow],
        result: GroceryListImportResult,
        log: Any,
    ) -> GroceryListImportResult:
        """Internal import implementation."""
        list_ids: Dict[str, uuid.UUID] = await load_name_index(session, GroceryList)

        for row in rows:
            key = row.name.lower()
            if key in list_ids:
                result.existing += 1
                log.debug("grocery_list_exists", name=row.name)
                continue

            try:
                async with session.begin_nested():
                    grocery_list = await insert_grocery_list(session, row.name)
            except DatabaseError as e:
                result.failed += 1
                result.errors.append(f"Error inserting '{row.name}': {e.message}")
                log.warning(
                    "grocery_list_insert_failed",
                    row_number=row.row_number,
                    error=e.message,
                )
                continue

            list_ids[key] = grocery_list.id
            result.inserted += 1
            log.info("grocery_list_inserted", name=row.name)

        return result


async def import_grocery_lists_file(
    file_path: str,
    sheet_name: Optional[str] = None,
    session: Optional[AsyncSession] = None,
) -> GroceryListImportResult:
    """Parse a grocery lists export (.xlsx or .csv) and import it.

    Raises:
        ParserError: If the file cannot be read
        ValidationError: If the file has no name column
    """
    parser_type = parser_type_for_path(file_path)
    parser = create_parser_instance(parser_type)
    config = {"file_path": file_path, "row_kind": RowKind.GROCERY_LISTS.value}
    if parser_type == "excel" and sheet_name:
        config["sheet_name"] = sheet_name

    rows = await parser.parse(config)
    logger.info(
        "grocery_lists_file_parsed",
        file_path=file_path,
        rows=len(rows),
        rejected=len(parser.rejected_rows),
    )
    return await GroceryListImporter().run(
        rows, session=session, invalid_rows=len(parser.rejected_rows)
    )
