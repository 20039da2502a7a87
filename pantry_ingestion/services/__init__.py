"""Business logic services for the grocery import pipeline.

Available Services:
    - classification: Ordered keyword-rule category classifier
    - category_registry: Immutable category name -> id snapshot
    - grocery_type_importer: Classify and upsert grocery types
    - grocery_list_importer: Create missing grocery lists
    - grocery_list_item_importer: Add grocery types to grocery lists
    - category_sync: Converge stored categories to the curated list
"""
from pantry_ingestion.services.classification import (
    CategoryClassifier,
    ClassificationResult,
    CategoryRule,
    classify,
)
from pantry_ingestion.services.category_registry import (
    CategoryRegistry,
    load_category_registry,
)
from pantry_ingestion.services.grocery_type_importer import (
    GroceryTypeImporter,
    import_grocery_types_file,
)
from pantry_ingestion.services.grocery_list_importer import (
    GroceryListImporter,
    import_grocery_lists_file,
)
from pantry_ingestion.services.grocery_list_item_importer import (
    GroceryListItemImporter,
    import_grocery_list_items_file,
)
from pantry_ingestion.services.category_sync import CategorySync

__all__: list[str] = [
    # Classification
    "CategoryClassifier",
    "ClassificationResult",
    "CategoryRule",
    "classify",
    # Registry
    "CategoryRegistry",
    "load_category_registry",
    # Importers
    "GroceryTypeImporter",
    "import_grocery_types_file",
    "GroceryListImporter",
    "import_grocery_lists_file",
    "GroceryListItemImporter",
    "import_grocery_list_items_file",
    # Category sync
    "CategorySync",
]
