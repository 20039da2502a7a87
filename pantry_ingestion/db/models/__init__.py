"""ORM mappings for the grocery tables touched by the import scripts."""
from pantry_ingestion.db.models.grocery_category import GroceryCategory
from pantry_ingestion.db.models.grocery_type import GroceryType
from pantry_ingestion.db.models.grocery_list import GroceryList, GroceryListItem

__all__ = [
    "GroceryCategory",
    "GroceryType",
    "GroceryList",
    "GroceryListItem",
]
