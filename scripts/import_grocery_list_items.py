#!/usr/bin/env python3
"""Import grocery list items from a spreadsheet export.

Expected columns: grocery_list, grocery_type, quantity (optional, default 1),
units (optional, default "item"). Lists (see import_grocery_lists.py) and
grocery types must already exist; rows naming unknown ones are skipped, as
are rows with a blank list or type cell.

Usage:
    python scripts/import_grocery_list_items.py --file import/grocery_list_items.xlsx
"""
import asyncio
import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
script_dir = Path(__file__).parent
project_root = script_dir.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

import structlog

from pantry_ingestion.config import settings
from pantry_ingestion.errors import PantryIngestionError
from pantry_ingestion.services.grocery_list_item_importer import import_grocery_list_items_file

logger = structlog.get_logger("import_grocery_list_items")


def main() -> int:
    parser = argparse.ArgumentParser(description="Import grocery list items")
    parser.add_argument(
        "--file",
        default=str(Path(settings.import_dir) / settings.grocery_list_items_file),
        help="Path to the .xlsx or .csv export (default: %(default)s)",
    )
    parser.add_argument("--sheet", default=None, help="Worksheet name (default: first sheet)")
    args = parser.parse_args()

    print(f"📦 Importing grocery list items from {args.file}")
    try:
        result = asyncio.run(import_grocery_list_items_file(args.file, sheet_name=args.sheet))
    except PantryIngestionError as e:
        logger.error("grocery_list_item_import_failed", error=e.message, error_type=type(e).__name__)
        print(f"❌ Import failed: {e.message}")
        return 1

    print("✅ Import complete.")
    print(f"  Inserted: {result.inserted}")
    print(f"  Skipped/Failed: {result.skipped}")
    for error in result.errors:
        print(f"  ⚠️  {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
