"""CSV file parser implementation."""
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List
import structlog

from pantry_ingestion.parsers.base_parser import TabularParser, ParsedRow
from pantry_ingestion.models.file_parser_config import CsvParserConfig
from pantry_ingestion.errors.exceptions import ParserError, ValidationError

logger = structlog.get_logger(__name__)


class CsvParser(TabularParser):
    """Parser for delimited-text exports of the grocery spreadsheets.
    
    Reads all cells as strings, maps headers to standard fields (exact
    aliases first, then fuzzy matching) and skips rows that fail
    validation.
    """
    
    def get_parser_name(self) -> str:
        """Return parser identifier."""
        return "csv"
    
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate parser-specific configuration.
        
        Raises:
            ValidationError: If configuration is invalid with detailed message
        """
        try:
            CsvParserConfig(**config)
            return True
        except Exception as e:
            raise ValidationError(f"Invalid CSV configuration: {e}") from e
    
    async def parse(self, config: Dict[str, Any]) -> List[ParsedRow]:
        """Parse rows from a CSV file."""
        try:
            parsed_config = CsvParserConfig(**config)
        except Exception as e:
            raise ValidationError(f"Invalid configuration: {e}") from e
        
        log = logger.bind(
            file_path=parsed_config.file_path,
            row_kind=parsed_config.row_kind.value,
        )
        
        file_path = Path(parsed_config.file_path)
        if not file_path.exists():
            raise ParserError(f"CSV file not found: {parsed_config.file_path}")
        
        read_kwargs = dict(
            delimiter=parsed_config.delimiter,
            header=parsed_config.header_row - 1,  # Convert to 0-indexed
            skiprows=list(range(parsed_config.header_row, parsed_config.data_start_row - 1)) or None,
            dtype=str,
            keep_default_na=True,
        )
        try:
            try:
                df = pd.read_csv(file_path, encoding=parsed_config.encoding, **read_kwargs)
            except UnicodeDecodeError as e:
                log.warning("utf8_decode_failed_trying_latin1", error=str(e))
                df = pd.read_csv(file_path, encoding='latin-1', **read_kwargs)
        except pd.errors.EmptyDataError:
            raise ParserError("CSV file is empty or contains no data")
        except pd.errors.ParserError as e:
            raise ParserError(f"CSV parsing error: {e}") from e
        except OSError as e:
            raise ParserError(f"Could not read CSV file: {e}") from e
        
        log.debug("csv_headers_read", headers=list(df.columns), row_count=len(df))
        return self.rows_from_frame(df, parsed_config, log)
