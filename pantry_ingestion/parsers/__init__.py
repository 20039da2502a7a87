"""Parser modules for import files."""
from pantry_ingestion.parsers.base_parser import ParserInterface, TabularParser
from pantry_ingestion.parsers.parser_registry import (
    register_parser,
    get_parser,
    create_parser_instance,
    parser_type_for_path,
    list_registered_parsers,
)
from pantry_ingestion.parsers.csv_parser import CsvParser
from pantry_ingestion.parsers.excel_parser import ExcelParser

# Register parsers
register_parser("csv", CsvParser)
register_parser("excel", ExcelParser)

__all__ = [
    "ParserInterface",
    "TabularParser",
    "register_parser",
    "get_parser",
    "create_parser_instance",
    "parser_type_for_path",
    "list_registered_parsers",
    "CsvParser",
    "ExcelParser",
]
