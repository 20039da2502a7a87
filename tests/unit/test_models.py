"""Unit tests for Pydantic validation models and settings.

This module tests:
- ParsedGroceryTypeRow / ParsedGroceryListItemRow: rows read from import files
- FileParserConfig: parser configuration validation
- GroceryTypeImportResult: per-row outcome bookkeeping
- ClassificationSettings / Settings: environment-driven configuration
"""
from decimal import Decimal
import pytest
from pydantic import ValidationError

from pantry_ingestion.config import ClassificationSettings, Settings
from pantry_ingestion.models import (
    CsvParserConfig,
    FileParserConfig,
    GroceryTypeImportResult,
    GroceryTypeOutcome,
    ImportAction,
    ParsedGroceryListItemRow,
    ParsedGroceryListRow,
    ParsedGroceryTypeRow,
    RowKind,
)


class TestParsedGroceryTypeRow:
    """Test ParsedGroceryTypeRow validation."""

    def test_name_is_stripped(self):
        row = ParsedGroceryTypeRow(name="  Peanut Butter ", row_number=2)

        assert row.name == "Peanut Butter"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ParsedGroceryTypeRow(name="   ", row_number=2)

        assert any(error["loc"] == ("name",) for error in exc_info.value.errors())

    def test_row_number_must_be_positive(self):
        with pytest.raises(ValidationError):
            ParsedGroceryTypeRow(name="Milk", row_number=0)


class TestParsedGroceryListRow:
    """Test ParsedGroceryListRow validation."""

    def test_name_is_stripped(self):
        assert ParsedGroceryListRow(name=" Braai Day ", row_number=2).name == "Braai Day"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ParsedGroceryListRow(name="  ", row_number=2)


class TestParsedGroceryListItemRow:
    """Test ParsedGroceryListItemRow validation."""

    def test_defaults(self):
        row = ParsedGroceryListItemRow(list_name="Weekly Staples", type_name="Milk", row_number=2)

        assert row.quantity == Decimal("1")
        assert row.unit == "item"

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            ParsedGroceryListItemRow(
                list_name="Weekly Staples", type_name="Milk", quantity=Decimal("0"), row_number=2
            )

        assert any(error["loc"] == ("quantity",) for error in exc_info.value.errors())

    def test_blank_type_name_rejected(self):
        with pytest.raises(ValidationError):
            ParsedGroceryListItemRow(list_name="Weekly Staples", type_name=" ", row_number=2)


class TestFileParserConfig:
    """Test FileParserConfig validation."""

    def test_defaults(self):
        config = FileParserConfig(file_path="import/grocery_types.xlsx")

        assert config.row_kind == RowKind.GROCERY_TYPES
        assert config.header_row == 1
        assert config.data_start_row == 2
        assert config.column_mapping is None

    def test_data_start_row_after_header(self):
        with pytest.raises(ValidationError):
            FileParserConfig(file_path="x.xlsx", header_row=3, data_start_row=3)

    def test_invalid_mapping_key(self):
        with pytest.raises(ValidationError) as exc_info:
            FileParserConfig(file_path="x.xlsx", column_mapping={"price": "Price"})

        assert "Invalid keys" in str(exc_info.value)

    def test_single_character_delimiter(self):
        assert CsvParserConfig(file_path="x.csv", delimiter=";").delimiter == ";"

        with pytest.raises(ValidationError):
            CsvParserConfig(file_path="x.csv", delimiter=";;")


class TestGroceryTypeImportResult:
    """Test outcome bookkeeping."""

    def test_record_counts_actions(self):
        result = GroceryTypeImportResult()

        result.record(GroceryTypeOutcome(name="Milk", category="Fridge", action=ImportAction.INSERTED))
        result.record(GroceryTypeOutcome(name="Eggs", category="Fridge", action=ImportAction.UPDATED))
        result.record(GroceryTypeOutcome(name="Bread", category="Bread & Bakery", action=ImportAction.UNCHANGED))
        result.record(GroceryTypeOutcome(
            name="Unobtainium", category="Pantry (Default)", action=ImportAction.FAILED,
            used_fallback=True, error="Row 5: duplicate key",
        ))

        assert (result.inserted, result.updated, result.unchanged, result.failed) == (1, 1, 1, 1)
        assert result.total_processed == 2
        assert result.fallback_count == 1
        assert result.errors == ["Row 5: duplicate key"]
        assert len(result.outcomes) == 4


class TestSettings:
    """Test environment-driven configuration."""

    def test_classification_defaults(self, monkeypatch):
        monkeypatch.delenv("CLASSIFY_FALLBACK_LABEL", raising=False)
        monkeypatch.delenv("CLASSIFY_FALLBACK_CATEGORY", raising=False)

        config = ClassificationSettings(_env_file=None)

        assert config.fallback_label == "Pantry (Default)"
        assert config.fallback_category == "Pantry"

    def test_classification_env_override(self, monkeypatch):
        monkeypatch.setenv("CLASSIFY_FALLBACK_CATEGORY", "Other")

        assert ClassificationSettings(_env_file=None).fallback_category == "Other"

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")

        assert Settings(_env_file=None).is_production is True

    def test_pool_size_bounds(self, monkeypatch):
        monkeypatch.setenv("DB_POOL_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
