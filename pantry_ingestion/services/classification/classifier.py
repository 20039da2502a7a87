"""Grocery item category classifier using ordered keyword rules.

Items are assigned to exactly one category by walking an ordered rule
table and taking the first rule with a keyword that occurs in the item
name as a whole word. The order of the table is the priority: specific
categories (baby products, toiletries) are listed before broad ones
(pantry, fridge) that share keywords with them.

Keyword matching:
- case-insensitive, anchored on ASCII word boundaries
- an optional plural "s" or "es" is accepted after the keyword;
  a keyword already ending in "s" only takes "es" ("glass" -> "glasses")
- keywords are regular expression fragments; one that does not
  compile never matches

Example:
    classifier = CategoryClassifier()
    result = classifier.classify("Peanut Butter 400g")
    # result.matched_category = "Pantry"
    # result.matched_rule.priority = 5
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple, AbstractSet
import structlog

from pantry_ingestion.config import classification_settings
from pantry_ingestion.services.classification.rules import CATEGORY_KEYWORD_TABLE

logger = structlog.get_logger(__name__)

PLURAL_SUFFIX = "(s|es)?"
PLURAL_SUFFIX_AFTER_S = "(es)?"


@dataclass(frozen=True)
class CategoryRule:
    """A category and its keywords at a fixed position in the rule table."""
    category: str
    keywords: Tuple[str, ...]
    priority: int


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying one item name."""
    matched_category: str
    matched_rule: Optional[CategoryRule] = None

    @property
    def is_fallback(self) -> bool:
        """Returns True if no rule matched and the fallback was used."""
        return self.matched_rule is None


def build_rules(table: Iterable[Tuple[str, Sequence[str]]]) -> Tuple[CategoryRule, ...]:
    """Build a rule table from ordered (category, keywords) pairs.

    Priority is the position of the pair in ``table``. Keywords are
    lowercased and stripped; blank keywords are dropped.

    Raises:
        ValueError: If a category appears more than once
    """
    rules: List[CategoryRule] = []
    seen = set()
    for priority, (category, keywords) in enumerate(table):
        if category in seen:
            raise ValueError(f"Category '{category}' appears more than once in the rule table")
        seen.add(category)
        cleaned = tuple(k.strip().lower() for k in keywords if k and k.strip())
        rules.append(CategoryRule(category=category, keywords=cleaned, priority=priority))
    return tuple(rules)


@lru_cache(maxsize=4096)
def keyword_pattern(keyword: str) -> Optional[Pattern[str]]:
    """Compile the whole-word pattern for a keyword.

    Returns:
        Compiled pattern, or None if the keyword is blank or not a valid
        regular expression fragment
    """
    if not keyword or not keyword.strip():
        return None
    suffix = PLURAL_SUFFIX_AFTER_S if keyword.endswith("s") else PLURAL_SUFFIX
    try:
        return re.compile(rf"\b{keyword}{suffix}\b", re.IGNORECASE | re.ASCII)
    except re.error:
        return None


def matches_keyword(name_lower: str, keyword: str) -> bool:
    """Check if keyword occurs in the name as a whole word (plural tolerant)."""
    pattern = keyword_pattern(keyword)
    if pattern is None:
        return False
    return pattern.search(name_lower) is not None


def classify(
    item_name: str,
    rules: Sequence[CategoryRule],
    fallback: str,
    known_categories: Optional[AbstractSet[str]] = None,
) -> ClassificationResult:
    """Assign an item name to exactly one category.

    Args:
        item_name: Free-text item name (any case, may contain punctuation)
        rules: Rule table in priority order, highest first
        fallback: Category label returned when no rule matches
        known_categories: If given, rules for categories outside this set
            are skipped

    Returns:
        ClassificationResult for the first matching rule, or the fallback
        with no matched rule
    """
    if not item_name or not item_name.strip():
        return ClassificationResult(matched_category=fallback)

    name_lower = item_name.lower()
    for rule in rules:
        if known_categories is not None and rule.category not in known_categories:
            continue
        if any(matches_keyword(name_lower, keyword) for keyword in rule.keywords):
            return ClassificationResult(matched_category=rule.category, matched_rule=rule)

    return ClassificationResult(matched_category=fallback)


DEFAULT_CATEGORY_RULES: Tuple[CategoryRule, ...] = build_rules(CATEGORY_KEYWORD_TABLE)


class CategoryClassifier:
    """Rule-based grocery item classifier bound to a rule table.

    Attributes:
        rules: Ordered rule table (highest priority first)
        fallback: Label returned when nothing matches
        known_categories: Optional set of categories that may be assigned
    """

    def __init__(
        self,
        rules: Optional[Sequence[CategoryRule]] = None,
        fallback: Optional[str] = None,
        known_categories: Optional[Iterable[str]] = None,
    ):
        """Initialize classifier with rules.

        Args:
            rules: Rule table, defaults to the curated grocery table
            fallback: Fallback label, defaults to CLASSIFY_FALLBACK_LABEL
            known_categories: Categories registered in the store; rules for
                any other category are skipped. None means all rules apply.
        """
        self.rules: Tuple[CategoryRule, ...] = tuple(
            DEFAULT_CATEGORY_RULES if rules is None else rules
        )
        self.fallback = fallback if fallback is not None else classification_settings.fallback_label
        self.known_categories: Optional[frozenset] = (
            frozenset(known_categories) if known_categories is not None else None
        )
        self._log = logger.bind(component="CategoryClassifier")

    def classify(self, item_name: str) -> ClassificationResult:
        """Classify one item name."""
        result = classify(item_name, self.rules, self.fallback, self.known_categories)
        if result.is_fallback:
            self._log.debug(
                "classified_by_fallback",
                item=item_name[:50] if item_name else item_name,
                category=result.matched_category,
            )
        else:
            self._log.debug(
                "classified_by_keyword",
                item=item_name[:50],
                category=result.matched_category,
                priority=result.matched_rule.priority,
            )
        return result

    def classify_many(self, item_names: Iterable[str]) -> List[ClassificationResult]:
        """Classify item names independently, preserving input order."""
        return [self.classify(name) for name in item_names]

    def with_known_categories(self, known_categories: Iterable[str]) -> "CategoryClassifier":
        """Return a classifier restricted to the given categories."""
        return CategoryClassifier(
            rules=self.rules,
            fallback=self.fallback,
            known_categories=known_categories,
        )

    def get_all_categories(self) -> List[str]:
        """Get category names in priority order."""
        return [rule.category for rule in self.rules]
