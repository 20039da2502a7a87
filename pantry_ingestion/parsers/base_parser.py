"""Parser interface and shared tabular row handling for import files."""
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Union
import pandas as pd
from pydantic import ValidationError as PydanticValidationError
import structlog

from pantry_ingestion.models.file_parser_config import (
    FileParserConfig,
    RowKind,
    REQUIRED_FIELDS,
    OPTIONAL_FIELDS,
)
from pantry_ingestion.models.parsed_item import (
    ParsedGroceryTypeRow,
    ParsedGroceryListRow,
    ParsedGroceryListItemRow,
)
from pantry_ingestion.errors.exceptions import ValidationError

logger = structlog.get_logger(__name__)

ParsedRow = Union[ParsedGroceryTypeRow, ParsedGroceryListRow, ParsedGroceryListItemRow]

# Quantity used when the cell is blank or zero
DEFAULT_QUANTITY = Decimal("1")


class ParserInterface(ABC):
    """Abstract base class for all import file parsers.

    Implementations must provide:
    - parse(): Extract and validate rows from the source
    - validate_config(): Verify parser-specific configuration
    - get_parser_name(): Return unique parser identifier
    """

    @abstractmethod
    async def parse(self, config: Dict[str, Any]) -> List[ParsedRow]:
        """Parse rows from the source.

        Args:
            config: Parser-specific configuration dictionary

        Returns:
            List of validated rows; invalid rows are logged and left out

        Raises:
            ParserError: If the source cannot be read
            ValidationError: If the configuration or column layout is invalid
        """
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate parser-specific configuration.

        Raises:
            ValidationError: If configuration is invalid
        """
        pass

    @abstractmethod
    def get_parser_name(self) -> str:
        """Return parser identifier (e.g., "csv", "excel")."""
        pass


class TabularParser(ParserInterface):
    """Shared column mapping and row validation for DataFrame-backed parsers."""

    # Header aliases per standard field, most likely first
    STANDARD_FIELDS = {
        'name': ['name', 'grocery type', 'grocery_type', 'item', 'item name', 'product', 'description',
                 'list name', 'grocery list'],
        'grocery_list': ['grocery_list', 'grocery list', 'list', 'list name'],
        'grocery_type': ['grocery_type', 'grocery type', 'type', 'item', 'item name'],
        'quantity': ['quantity', 'qty', 'amount'],
        'units': ['units', 'unit', 'uom'],
    }

    FUZZY_CUTOFF = 0.8

    def __init__(self):
        # Row numbers dropped by the last parse
        self.rejected_rows: List[int] = []

    def rows_from_frame(
        self,
        df: pd.DataFrame,
        config: FileParserConfig,
        log: Any,
    ) -> List[ParsedRow]:
        """Map columns and convert every valid DataFrame row into a parsed row."""
        self.rejected_rows = []
        headers = [str(h) if pd.notna(h) else "" for h in df.columns]
        column_map = self._map_columns(headers, config.row_kind, config.column_mapping, log)

        parsed_rows: List[ParsedRow] = []
        for position in range(len(df)):
            row_number = position + config.data_start_row  # Human-readable row number
            row = df.iloc[position]
            try:
                parsed_rows.append(
                    self._parse_row(row, row_number, column_map, config.row_kind)
                )
            except ValidationError as e:
                self.rejected_rows.append(row_number)
                log.warning(
                    "row_validation_failed",
                    row_number=row_number,
                    error=str(e)
                )

        log.info(
            "parse_completed",
            total_rows=len(df),
            valid_rows=len(parsed_rows),
            skipped_rows=len(df) - len(parsed_rows)
        )
        return parsed_rows

    def _map_columns(
        self,
        headers: List[str],
        row_kind: RowKind,
        manual_mapping: Optional[Dict[str, str]],
        log: Any
    ) -> Dict[str, int]:
        """Map file column headers to standard field names.

        Returns:
            Dictionary mapping standard field names to column indices (0-indexed)

        Raises:
            ValidationError: If required columns cannot be mapped
        """
        column_map: Dict[str, int] = {}
        normalized_headers = [h.strip().lower() for h in headers]
        wanted = sorted(REQUIRED_FIELDS[row_kind]) + sorted(OPTIONAL_FIELDS[row_kind])

        if manual_mapping:
            log.debug("using_manual_column_mapping", mapping=manual_mapping)
            for field_name, header_name in manual_mapping.items():
                try:
                    column_map[field_name] = normalized_headers.index(header_name.strip().lower())
                except ValueError:
                    raise ValidationError(
                        f"Manual column mapping '{header_name}' not found in headers. "
                        f"Available: {headers}"
                    )

        for field_name in wanted:
            if field_name in column_map:
                continue
            used = set(column_map.values())
            for possible_name in self.STANDARD_FIELDS[field_name]:
                if possible_name in normalized_headers:
                    col_idx = normalized_headers.index(possible_name)
                    if col_idx not in used:
                        column_map[field_name] = col_idx
                        log.debug("column_mapped", field=field_name, header=headers[col_idx], index=col_idx)
                        break
            else:
                candidates = [h for i, h in enumerate(normalized_headers) if i not in used and h]
                matches = get_close_matches(
                    self.STANDARD_FIELDS[field_name][0], candidates, n=1, cutoff=self.FUZZY_CUTOFF
                )
                if matches:
                    col_idx = normalized_headers.index(matches[0])
                    column_map[field_name] = col_idx
                    log.debug("column_fuzzy_mapped", field=field_name, header=headers[col_idx], index=col_idx)

        missing_fields = REQUIRED_FIELDS[row_kind] - set(column_map.keys())
        if missing_fields:
            raise ValidationError(
                f"Required columns not found: {sorted(missing_fields)}. "
                f"Available headers: {headers}. "
                f"Consider providing manual column_mapping in config."
            )

        log.info("column_mapping_complete", mapping=column_map)
        return column_map

    def _parse_row(
        self,
        row: pd.Series,
        row_number: int,
        column_map: Dict[str, int],
        row_kind: RowKind,
    ) -> ParsedRow:
        """Parse a single row for the given row kind."""
        try:
            if row_kind == RowKind.GROCERY_TYPES:
                return ParsedGroceryTypeRow(
                    name=self._get_cell_value(row, column_map['name'], row_number, 'name'),
                    row_number=row_number,
                )
            if row_kind == RowKind.GROCERY_LISTS:
                return ParsedGroceryListRow(
                    name=self._get_cell_value(row, column_map['name'], row_number, 'name'),
                    row_number=row_number,
                )

            quantity_text = self._get_optional_value(row, column_map.get('quantity'))
            unit = self._get_optional_value(row, column_map.get('units'))
            fields: Dict[str, Any] = {
                'list_name': self._get_cell_value(row, column_map['grocery_list'], row_number, 'grocery_list'),
                'type_name': self._get_cell_value(row, column_map['grocery_type'], row_number, 'grocery_type'),
                'row_number': row_number,
            }
            if quantity_text is not None:
                fields['quantity'] = self._parse_quantity(quantity_text, row_number)
            if unit is not None:
                fields['unit'] = unit
            return ParsedGroceryListItemRow(**fields)
        except PydanticValidationError as e:
            raise ValidationError(f"Row {row_number}: {e}") from e

    def _get_cell_value(self, row: pd.Series, col_idx: int, row_number: int, field_name: str) -> str:
        """Get a required cell value."""
        value = self._get_optional_value(row, col_idx)
        if value is None:
            raise ValidationError(f"Row {row_number}: Required field '{field_name}' is empty")
        return value

    def _get_optional_value(self, row: pd.Series, col_idx: Optional[int]) -> Optional[str]:
        """Get a cell value, or None when the column is absent or the cell is blank."""
        if col_idx is None or col_idx >= len(row):
            return None
        value = row.iloc[col_idx]
        if pd.isna(value) or str(value).strip() == '':
            return None
        return str(value).strip()

    def _parse_quantity(self, quantity_text: str, row_number: int) -> Decimal:
        """Parse a quantity cell into a positive Decimal; zero means the default."""
        try:
            quantity = Decimal(quantity_text.replace(',', '.'))
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f"Row {row_number}: Invalid quantity '{quantity_text}'") from e
        if quantity.is_finite() and quantity == 0:
            return DEFAULT_QUANTITY
        if not quantity.is_finite() or quantity < 0:
            raise ValidationError(f"Row {row_number}: Quantity must be positive: {quantity_text}")
        return quantity
