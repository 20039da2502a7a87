"""Unit tests for database operations against a mocked AsyncSession."""
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
import uuid
import pytest

from pantry_ingestion.db.models import GroceryList, GroceryListItem, GroceryType
from pantry_ingestion.db.operations import (
    insert_grocery_list,
    insert_grocery_list_item,
    insert_grocery_type,
    load_name_index,
    reassign_grocery_types,
    update_grocery_type_category,
)
from pantry_ingestion.errors import DatabaseError


class TestInsertGroceryType:

    @pytest.mark.asyncio
    async def test_adds_and_flushes(self, mock_session):
        category_id = uuid.uuid4()

        grocery_type = await insert_grocery_type(mock_session, "Peanut Butter", category_id)

        assert isinstance(grocery_type, GroceryType)
        assert grocery_type.name == "Peanut Butter"
        assert grocery_type.category_id == category_id
        assert grocery_type.default_store_id is None
        mock_session.add.assert_called_once_with(grocery_type)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_flush_failure_wrapped(self, mock_session):
        mock_session.flush = AsyncMock(side_effect=RuntimeError("unique violation"))

        with pytest.raises(DatabaseError, match="Peanut Butter"):
            await insert_grocery_type(mock_session, "Peanut Butter", uuid.uuid4())


class TestUpdateGroceryTypeCategory:

    @pytest.mark.asyncio
    async def test_sets_category(self, mock_session):
        grocery_type = GroceryType(name="Eggs", category_id=uuid.uuid4())
        fridge_id = uuid.uuid4()

        await update_grocery_type_category(mock_session, grocery_type, fridge_id)

        assert grocery_type.category_id == fridge_id
        mock_session.flush.assert_awaited_once()


class TestLoadNameIndex:

    @pytest.mark.asyncio
    async def test_keys_are_normalized(self, mock_session):
        first, second = uuid.uuid4(), uuid.uuid4()
        rows = MagicMock()
        rows.all.return_value = [(first, " Weekly Staples "), (second, "weekly staples"), (uuid.uuid4(), None)]
        mock_session.execute = AsyncMock(return_value=rows)

        index = await load_name_index(mock_session, GroceryList)

        assert index == {"weekly staples": first}

    @pytest.mark.asyncio
    async def test_query_failure_wrapped(self, mock_session):
        mock_session.execute = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(DatabaseError, match="grocery_lists"):
            await load_name_index(mock_session, GroceryList)


class TestInsertGroceryList:

    @pytest.mark.asyncio
    async def test_adds_and_flushes(self, mock_session):
        grocery_list = await insert_grocery_list(mock_session, "Weekly Staples")

        assert isinstance(grocery_list, GroceryList)
        assert grocery_list.name == "Weekly Staples"
        mock_session.add.assert_called_once_with(grocery_list)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_flush_failure_wrapped(self, mock_session):
        mock_session.flush = AsyncMock(side_effect=RuntimeError("value too long"))

        with pytest.raises(DatabaseError, match="Weekly Staples"):
            await insert_grocery_list(mock_session, "Weekly Staples")


class TestInsertGroceryListItem:

    @pytest.mark.asyncio
    async def test_new_item_is_not_purchased_or_in_stock(self, mock_session):
        item = await insert_grocery_list_item(
            mock_session, uuid.uuid4(), uuid.uuid4(), Decimal("2"), "litre"
        )

        assert isinstance(item, GroceryListItem)
        assert item.is_purchased is False
        assert item.is_in_stock is False
        assert item.quantity == Decimal("2")
        assert item.unit == "litre"


class TestReassignGroceryTypes:

    @pytest.mark.asyncio
    async def test_returns_rowcount(self, mock_session):
        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=3))

        moved = await reassign_grocery_types(mock_session, uuid.uuid4(), uuid.uuid4())

        assert moved == 3
