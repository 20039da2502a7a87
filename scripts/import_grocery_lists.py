#!/usr/bin/env python3
"""Create the grocery lists named in a spreadsheet export.

Expected column: name. Lists that already exist (case-insensitive) are
left alone. Run this before import_grocery_list_items.py.

Usage:
    python scripts/import_grocery_lists.py
    python scripts/import_grocery_lists.py --file import/grocery_lists.csv
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
from pantry_ingestion.services.grocery_list_importer import import_grocery_lists_file

logger = structlog.get_logger("import_grocery_lists")


def main() -> int:
    parser = argparse.ArgumentParser(description="Import grocery lists")
    parser.add_argument(
        "--file",
        default=str(Path(settings.import_dir) / settings.grocery_lists_file),
        help="Path to the .xlsx or .csv export (default: %(default)s)",
    )
    parser.add_argument("--sheet", default=None, help="Worksheet name (default: first sheet)")
    args = parser.parse_args()

    print(f"📦 Importing grocery lists from {args.file}")
    try:
        result = asyncio.run(import_grocery_lists_file(args.file, sheet_name=args.sheet))
    except PantryIngestionError as e:
        logger.error("grocery_list_import_failed", error=e.message, error_type=type(e).__name__)
        print(f"❌ Import failed: {e.message}")
        return 1

    print("✅ Import complete.")
    print(f"  Inserted: {result.inserted}")
    print(f"  Existing: {result.existing}")
    print(f"  Skipped:  {result.skipped}")
    print(f"  Failed:   {result.failed}")
    for error in result.errors:
        print(f"  ⚠️  {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
