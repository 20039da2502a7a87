#!/usr/bin/env python3
"""Show which category the curated rules assign to item names.

Does not touch the database.

Usage:
    python scripts/classify_item.py "Peanut Butter" "Dish Soap" "Frozen Peas"
    python scripts/classify_item.py --exclude Toiletries "Dish Soap"
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
script_dir = Path(__file__).parent
project_root = script_dir.parent
sys.path.insert(0, str(project_root))

from pantry_ingestion.services.classification import CategoryClassifier


def main() -> int:
    parser = argparse.ArgumentParser(description="Classify grocery item names")
    parser.add_argument("names", nargs="+", help="Item names to classify")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="CATEGORY",
        help="Treat a category as unregistered (repeatable)",
    )
    args = parser.parse_args()

    classifier = CategoryClassifier()
    if args.exclude:
        known = set(classifier.get_all_categories()) - set(args.exclude)
        classifier = classifier.with_known_categories(known)

    width = max(len(name) for name in args.names)
    for name in args.names:
        result = classifier.classify(name)
        marker = " (no rule matched)" if result.is_fallback else ""
        print(f"{name:<{width}}  ->  {result.matched_category}{marker}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
