"""Unit tests for GroceryTypeImporter.

Tests cover:
    - Insert of new names with their classified category
    - Update when the stored category differs, no-op when it matches
    - Fallback to Pantry for unmatched names
    - Per-row database errors do not stop the run
    - Missing fallback category aborts the run
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch
import uuid
import pytest

from pantry_ingestion.errors import CategoryRegistryError, DatabaseError
from pantry_ingestion.models import ImportAction, ParsedGroceryTypeRow
from pantry_ingestion.services.category_registry import CategoryRegistry
from pantry_ingestion.services.grocery_type_importer import (
    GroceryTypeImporter,
    import_grocery_types_file,
)

MODULE = "pantry_ingestion.services.grocery_type_importer"


def rows(*names):
    return [ParsedGroceryTypeRow(name=name, row_number=i + 2) for i, name in enumerate(names)]


@pytest.fixture
def registry(category_ids):
    return CategoryRegistry(category_ids)


class TestGroceryTypeImporter:
    """Tests for GroceryTypeImporter.run."""

    @pytest.mark.asyncio
    async def test_inserts_new_grocery_types(self, mock_session, registry, category_ids):
        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert:

            result = await GroceryTypeImporter().run(rows("Peanut Butter", "Nappies"), session=mock_session)

        assert result.inserted == 2
        assert result.failed == 0
        mock_insert.assert_any_await(mock_session, "Peanut Butter", category_ids["Pantry"])
        mock_insert.assert_any_await(mock_session, "Nappies", category_ids["Baby / Kids"])
        assert [o.category for o in result.outcomes] == ["Pantry", "Baby / Kids"]

    @pytest.mark.asyncio
    async def test_unmatched_name_filed_under_pantry(self, mock_session, registry, category_ids):
        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert:

            result = await GroceryTypeImporter().run(rows("Unobtainium Powder"), session=mock_session)

        mock_insert.assert_awaited_once_with(mock_session, "Unobtainium Powder", category_ids["Pantry"])
        outcome = result.outcomes[0]
        assert outcome.category == "Pantry (Default)"
        assert outcome.used_fallback is True
        assert result.fallback_count == 1

    @pytest.mark.asyncio
    async def test_updates_changed_category(self, mock_session, registry, category_ids):
        existing = SimpleNamespace(id=uuid.uuid4(), name="Eggs", category_id=category_ids["Other"])

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=existing)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert, \
             patch(f"{MODULE}.update_grocery_type_category", AsyncMock()) as mock_update:

            result = await GroceryTypeImporter().run(rows("Eggs"), session=mock_session)

        mock_insert.assert_not_awaited()
        mock_update.assert_awaited_once_with(mock_session, existing, category_ids["Fridge"])
        assert result.updated == 1
        assert result.outcomes[0].action == ImportAction.UPDATED

    @pytest.mark.asyncio
    async def test_leaves_unchanged_category_alone(self, mock_session, registry, category_ids):
        existing = SimpleNamespace(id=uuid.uuid4(), name="Eggs", category_id=category_ids["Fridge"])

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=existing)), \
             patch(f"{MODULE}.update_grocery_type_category", AsyncMock()) as mock_update:

            result = await GroceryTypeImporter().run(rows("Eggs"), session=mock_session)

        mock_update.assert_not_awaited()
        assert result.unchanged == 1
        assert result.total_processed == 0

    @pytest.mark.asyncio
    async def test_unregistered_category_is_skipped(self, mock_session, category_ids):
        """Dish Soap goes to Cleaning & Home when Toiletries is not in the store."""
        ids = {k: v for k, v in category_ids.items() if k != "Toiletries"}
        registry = CategoryRegistry(ids)

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert:

            result = await GroceryTypeImporter().run(rows("Dish Soap"), session=mock_session)

        mock_insert.assert_awaited_once_with(mock_session, "Dish Soap", category_ids["Cleaning & Home"])
        assert result.outcomes[0].category == "Cleaning & Home"

    @pytest.mark.asyncio
    async def test_row_error_recorded_and_run_continues(self, mock_session, registry, transaction):
        insert = AsyncMock(side_effect=[DatabaseError("duplicate key"), None])

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", insert):

            result = await GroceryTypeImporter().run(rows("Milk", "Bread"), session=mock_session)

        assert result.failed == 1
        assert result.inserted == 1
        assert result.outcomes[0].action == ImportAction.FAILED
        assert "duplicate key" in result.errors[0]
        assert transaction.rolled_back == 1

    @pytest.mark.asyncio
    async def test_missing_fallback_category_aborts(self, mock_session):
        registry = CategoryRegistry({"Fridge": uuid.uuid4()})

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert:

            with pytest.raises(CategoryRegistryError):
                await GroceryTypeImporter().run(rows("Milk"), session=mock_session)

        mock_insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_custom_fallback_category(self, mock_session, registry, category_ids):
        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()) as mock_insert:

            await GroceryTypeImporter(fallback_category="Other").run(
                rows("Unobtainium Powder"), session=mock_session
            )

        mock_insert.assert_awaited_once_with(mock_session, "Unobtainium Powder", category_ids["Other"])


class TestImportGroceryTypesFile:
    """Tests for the file-level helper."""

    @pytest.mark.asyncio
    async def test_parses_csv_and_imports(self, tmp_path, mock_session, registry):
        csv_file = tmp_path / "grocery_types.csv"
        csv_file.write_text("name\nPeanut Butter\n\nFrozen Peas\n", encoding="utf-8")

        with patch(f"{MODULE}.load_category_registry", AsyncMock(return_value=registry)), \
             patch(f"{MODULE}.get_grocery_type_by_name", AsyncMock(return_value=None)), \
             patch(f"{MODULE}.insert_grocery_type", AsyncMock()):

            result = await import_grocery_types_file(str(csv_file), session=mock_session)

        assert result.inserted == 2
        assert [o.category for o in result.outcomes] == ["Pantry", "Freezer"]
