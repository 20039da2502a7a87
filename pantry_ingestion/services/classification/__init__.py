"""Grocery item category classification.

Key Components:
    - CategoryClassifier: Ordered keyword-rule classifier
    - classify: Pure classification function over an explicit rule table
    - DEFAULT_CATEGORY_RULES: Curated grocery rule table
"""
from pantry_ingestion.services.classification.classifier import (
    CategoryClassifier,
    ClassificationResult,
    CategoryRule,
    DEFAULT_CATEGORY_RULES,
    build_rules,
    classify,
)
from pantry_ingestion.services.classification.rules import (
    CATEGORY_KEYWORD_TABLE,
    CURATED_CATEGORIES,
)

__all__ = [
    "CategoryClassifier",
    "ClassificationResult",
    "CategoryRule",
    "DEFAULT_CATEGORY_RULES",
    "build_rules",
    "classify",
    "CATEGORY_KEYWORD_TABLE",
    "CURATED_CATEGORIES",
]
