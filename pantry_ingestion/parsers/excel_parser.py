"""Excel (.xlsx) file parser implementation."""
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List
import structlog

from pantry_ingestion.parsers.base_parser import TabularParser, ParsedRow
from pantry_ingestion.models.file_parser_config import ExcelParserConfig
from pantry_ingestion.errors.exceptions import ParserError, ValidationError

logger = structlog.get_logger(__name__)


class ExcelParser(TabularParser):
    """Parser for the grocery spreadsheets (pandas + openpyxl).
    
    Reads the configured worksheet, or the first one when no sheet name
    is given.
    """
    
    def get_parser_name(self) -> str:
        """Return parser identifier."""
        return "excel"
    
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate parser-specific configuration.
        
        Raises:
            ValidationError: If configuration is invalid with detailed message
        """
        try:
            ExcelParserConfig(**config)
            return True
        except Exception as e:
            raise ValidationError(f"Invalid Excel configuration: {e}") from e
    
    async def parse(self, config: Dict[str, Any]) -> List[ParsedRow]:
        """Parse rows from an Excel worksheet."""
        try:
            parsed_config = ExcelParserConfig(**config)
        except Exception as e:
            raise ValidationError(f"Invalid configuration: {e}") from e
        
        log = logger.bind(
            file_path=parsed_config.file_path,
            sheet_name=parsed_config.sheet_name,
            row_kind=parsed_config.row_kind.value,
        )
        
        file_path = Path(parsed_config.file_path)
        if not file_path.exists():
            raise ParserError(f"Excel file not found: {parsed_config.file_path}")
        
        try:
            df = pd.read_excel(
                file_path,
                sheet_name=parsed_config.sheet_name if parsed_config.sheet_name else 0,
                header=parsed_config.header_row - 1,
                skiprows=list(range(parsed_config.header_row, parsed_config.data_start_row - 1)) or None,
                dtype=str,
                engine="openpyxl",
            )
        except ValueError as e:
            # Raised for a missing worksheet name
            raise ParserError(f"Worksheet not found: {e}") from e
        except Exception as e:
            raise ParserError(f"Failed to read Excel file: {e}") from e
        
        log.info("excel_sheet_read", total_rows=len(df))
        return self.rows_from_frame(df, parsed_config, log)
