"""Pydantic models for file-based parser configuration (CSV, Excel)."""
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional


class RowKind(str, Enum):
    """Which import file layout the parser should read."""
    GROCERY_TYPES = "grocery_types"
    GROCERY_LISTS = "grocery_lists"
    GROCERY_LIST_ITEMS = "grocery_list_items"


# Standard fields required for each row kind
REQUIRED_FIELDS = {
    RowKind.GROCERY_TYPES: {'name'},
    RowKind.GROCERY_LISTS: {'name'},
    RowKind.GROCERY_LIST_ITEMS: {'grocery_list', 'grocery_type'},
}

OPTIONAL_FIELDS = {
    RowKind.GROCERY_TYPES: set(),
    RowKind.GROCERY_LISTS: set(),
    RowKind.GROCERY_LIST_ITEMS: {'quantity', 'units'},
}


class FileParserConfig(BaseModel):
    """Base configuration for file-based parsers (CSV, Excel)."""
    
    file_path: str = Field(
        ...,
        min_length=1,
        description="Path to the file to parse"
    )
    row_kind: RowKind = Field(
        default=RowKind.GROCERY_TYPES,
        description="Layout of the rows in the file"
    )
    column_mapping: Optional[Dict[str, str]] = Field(
        default=None,
        description=(
            "Manual column mapping from standard fields to header names. "
            "If provided, overrides automatic column detection."
        )
    )
    header_row: int = Field(
        default=1,
        ge=1,
        description="Row number (1-indexed) containing column headers"
    )
    data_start_row: int = Field(
        default=2,
        ge=1,
        description="Row number (1-indexed) where data rows begin"
    )
    
    @field_validator('file_path')
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        """Validate file path is not empty."""
        if not v.strip():
            raise ValueError('file_path cannot be empty or whitespace')
        return v.strip()
    
    @field_validator('column_mapping')
    @classmethod
    def validate_column_mapping_keys(cls, v: Optional[Dict[str, str]], info) -> Optional[Dict[str, str]]:
        """Validate column_mapping keys are valid field names for the row kind."""
        if v is None:
            return v
        
        row_kind = info.data.get('row_kind', RowKind.GROCERY_TYPES)
        valid_keys = REQUIRED_FIELDS[row_kind] | OPTIONAL_FIELDS[row_kind]
        invalid_keys = set(v.keys()) - valid_keys
        if invalid_keys:
            raise ValueError(
                f"column_mapping keys must be one of {sorted(valid_keys)}. "
                f"Invalid keys: {sorted(invalid_keys)}"
            )
        return v
    
    @field_validator('data_start_row')
    @classmethod
    def validate_data_start_after_header(cls, v: int, info) -> int:
        """Validate data_start_row is after the header row."""
        header_row = info.data.get('header_row', 1)
        if v <= header_row:
            raise ValueError(
                f'data_start_row ({v}) must be greater than header_row ({header_row})'
            )
        return v


class CsvParserConfig(FileParserConfig):
    """Configuration for CSV imports."""
    
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    encoding: str = Field(default="utf-8")


class ExcelParserConfig(FileParserConfig):
    """Configuration for Excel imports. Defaults to the first worksheet."""
    
    sheet_name: Optional[str] = Field(
        default=None,
        description="Worksheet to read; None reads the first sheet"
    )
