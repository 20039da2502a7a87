"""Unit tests for CategoryRegistry and load_category_registry."""
from unittest.mock import AsyncMock, MagicMock
import uuid
import pytest

from pantry_ingestion.errors import CategoryRegistryError, DatabaseError
from pantry_ingestion.services.category_registry import (
    CategoryRegistry,
    load_category_registry,
)


class TestCategoryRegistry:
    """Test the immutable name -> id snapshot."""

    def test_lookup(self):
        pantry_id = uuid.uuid4()
        registry = CategoryRegistry({"Pantry": pantry_id})

        assert registry.get("Pantry") == pantry_id
        assert registry.require("Pantry") == pantry_id
        assert registry.contains("Pantry")
        assert "Pantry" in registry
        assert registry.get("Fridge") is None
        assert len(registry) == 1

    def test_lookup_is_exact(self):
        registry = CategoryRegistry({"Pantry": uuid.uuid4()})

        assert registry.get("pantry") is None
        assert "Pantry " not in registry

    def test_require_missing_raises(self):
        registry = CategoryRegistry({})

        with pytest.raises(CategoryRegistryError) as exc_info:
            registry.require("Pantry")

        assert exc_info.value.category_name == "Pantry"
        assert "Pantry" in str(exc_info.value)

    def test_snapshot_is_not_affected_by_source_mapping(self):
        source = {"Pantry": uuid.uuid4()}
        registry = CategoryRegistry(source)

        source["Fridge"] = uuid.uuid4()

        assert "Fridge" not in registry
        assert registry.names == frozenset({"Pantry"})

    def test_snapshot_cannot_be_mutated(self):
        registry = CategoryRegistry({"Pantry": uuid.uuid4()})

        with pytest.raises(AttributeError):
            registry.extra = 1
        with pytest.raises(TypeError):
            registry._ids["Fridge"] = uuid.uuid4()

    def test_from_rows_keeps_first_duplicate(self):
        first, second = uuid.uuid4(), uuid.uuid4()

        registry = CategoryRegistry.from_rows([(first, "Pantry"), (second, "Pantry")])

        assert registry.get("Pantry") == first

    def test_as_dict_returns_copy(self):
        registry = CategoryRegistry({"Pantry": uuid.uuid4()})

        copy = registry.as_dict()
        copy.clear()

        assert len(registry) == 1


class TestLoadCategoryRegistry:
    """Test loading the registry from the database."""

    @pytest.mark.asyncio
    async def test_loads_rows(self):
        pantry_id, fridge_id = uuid.uuid4(), uuid.uuid4()
        rows = MagicMock()
        rows.all.return_value = [(pantry_id, "Pantry"), (fridge_id, "Fridge")]
        session = AsyncMock()
        session.execute = AsyncMock(return_value=rows)

        registry = await load_category_registry(session)

        assert registry.require("Pantry") == pantry_id
        assert registry.require("Fridge") == fridge_id
        session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wraps_database_errors(self):
        session = AsyncMock()
        session.execute = AsyncMock(side_effect=RuntimeError("connection refused"))

        with pytest.raises(DatabaseError) as exc_info:
            await load_category_registry(session)

        assert "connection refused" in exc_info.value.message
