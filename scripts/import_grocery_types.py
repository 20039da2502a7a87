#!/usr/bin/env python3
"""Import grocery types from a spreadsheet export, assigning categories.

Every name is classified against the curated keyword rules; names that
match no rule are filed under Pantry. Existing grocery types are only
touched when their category changes.

Usage:
    python scripts/import_grocery_types.py
    python scripts/import_grocery_types.py --file import/grocery_types.csv
    python scripts/import_grocery_types.py --file import/grocery_types.xlsx --sheet Types --show-fallback
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
from pantry_ingestion.services.grocery_type_importer import import_grocery_types_file

logger = structlog.get_logger("import_grocery_types")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Import grocery types and assign categories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--file",
        default=str(Path(settings.import_dir) / settings.grocery_types_file),
        help="Path to the .xlsx or .csv export (default: %(default)s)",
    )
    parser.add_argument("--sheet", default=None, help="Worksheet name (default: first sheet)")
    parser.add_argument(
        "--show-fallback",
        action="store_true",
        help="List the names that matched no rule",
    )
    args = parser.parse_args()

    print(f"📦 Importing grocery types from {args.file}")
    try:
        result = asyncio.run(import_grocery_types_file(args.file, sheet_name=args.sheet))
    except PantryIngestionError as e:
        logger.error("grocery_type_import_failed", error=e.message, error_type=type(e).__name__)
        print(f"❌ Import failed: {e.message}")
        return 1

    for outcome in result.outcomes:
        if outcome.action.value in ("inserted", "updated"):
            print(f"  {outcome.action.value.capitalize()}: {outcome.name} -> {outcome.category}")

    if args.show_fallback:
        fallback = [o.name for o in result.outcomes if o.used_fallback]
        print(f"\nNo rule matched {len(fallback)} name(s):")
        for name in fallback:
            print(f"  - {name}")

    print("\n✅ Import complete.")
    print(f"  Inserted:  {result.inserted}")
    print(f"  Updated:   {result.updated}")
    print(f"  Unchanged: {result.unchanged}")
    print(f"  Failed:    {result.failed}")
    for error in result.errors:
        print(f"  ⚠️  {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
