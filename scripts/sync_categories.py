#!/usr/bin/env python3
"""Sync grocery_categories with the curated category list.

Renames the legacy "Produce" category, sets sort orders, creates missing
categories and deletes unused ones (moving their grocery types to "Other"
when they are still referenced).

Usage:
    python scripts/sync_categories.py
"""
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
script_dir = Path(__file__).parent
project_root = script_dir.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

import structlog

from pantry_ingestion.errors import PantryIngestionError
from pantry_ingestion.services.category_sync import CategorySync

logger = structlog.get_logger("sync_categories")


def main() -> int:
    print("Syncing grocery categories...")
    try:
        result = asyncio.run(CategorySync().run())
    except PantryIngestionError as e:
        logger.error("category_sync_failed", error=e.message, error_type=type(e).__name__)
        print(f"❌ Category sync failed: {e.message}")
        return 1

    for rename in result.renamed:
        print(f"  Renamed: {rename}")
    print(f"  Created: {result.created}")
    print(f"  Updated: {result.updated}")
    print(f"  Deleted: {result.deleted} (reassigned {result.reassigned_types} grocery types)")
    for error in result.errors:
        print(f"  ⚠️  {error}")
    print("Category update complete.")
    return 0 if not result.errors else 1


if __name__ == "__main__":
    sys.exit(main())
