"""Pydantic models for import rows, parser configuration and run results."""
from pantry_ingestion.models.parsed_item import (
    ParsedGroceryTypeRow,
    ParsedGroceryListRow,
    ParsedGroceryListItemRow,
)
from pantry_ingestion.models.file_parser_config import (
    RowKind,
    FileParserConfig,
    CsvParserConfig,
    ExcelParserConfig,
)
from pantry_ingestion.models.import_result import (
    ImportAction,
    GroceryTypeOutcome,
    GroceryTypeImportResult,
    GroceryListImportResult,
    GroceryListItemImportResult,
    CategorySyncResult,
)

__all__ = [
    "ParsedGroceryTypeRow",
    "ParsedGroceryListRow",
    "ParsedGroceryListItemRow",
    "RowKind",
    "FileParserConfig",
    "CsvParserConfig",
    "ExcelParserConfig",
    "ImportAction",
    "GroceryTypeOutcome",
    "GroceryTypeImportResult",
    "GroceryListImportResult",
    "GroceryListItemImportResult",
    "CategorySyncResult",
]
