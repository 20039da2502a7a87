"""Result models for import and sync runs."""
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class ImportAction(str, Enum):
    """What happened to one imported row."""
    INSERTED = "inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


class GroceryTypeOutcome(BaseModel):
    """Audit record for one grocery type row."""
    name: str
    category: str = Field(description="Category label assigned, including the fallback label")
    action: ImportAction
    used_fallback: bool = False
    error: Optional[str] = None


class GroceryTypeImportResult(BaseModel):
    """Result of a grocery type import run."""
    inserted: int = Field(default=0, ge=0)
    updated: int = Field(default=0, ge=0)
    unchanged: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    outcomes: List[GroceryTypeOutcome] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    
    @property
    def total_processed(self) -> int:
        """Rows written to the store (inserted + updated)."""
        return self.inserted + self.updated
    
    @property
    def fallback_count(self) -> int:
        """Rows that no rule matched."""
        return sum(1 for o in self.outcomes if o.used_fallback)
    
    def record(self, outcome: GroceryTypeOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.action == ImportAction.INSERTED:
            self.inserted += 1
        elif outcome.action == ImportAction.UPDATED:
            self.updated += 1
        elif outcome.action == ImportAction.UNCHANGED:
            self.unchanged += 1
        elif outcome.action == ImportAction.FAILED:
            self.failed += 1
            if outcome.error:
                self.errors.append(outcome.error)


class GroceryListImportResult(BaseModel):
    """Result of a grocery list import run."""
    inserted: int = Field(default=0, ge=0)
    existing: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0, description="Rows rejected by the parser")
    failed: int = Field(default=0, ge=0)
    errors: List[str] = Field(default_factory=list)


class GroceryListItemImportResult(BaseModel):
    """Result of a grocery list item import run."""
    inserted: int = Field(default=0, ge=0)
    skipped: int = Field(
        default=0,
        ge=0,
        description="Rows not inserted: rejected by the parser, unresolved, or failed",
    )
    errors: List[str] = Field(default_factory=list)


class CategorySyncResult(BaseModel):
    """Result of syncing stored categories to the curated list."""
    renamed: List[str] = Field(default_factory=list)
    created: int = Field(default=0, ge=0)
    updated: int = Field(default=0, ge=0)
    deleted: int = Field(default=0, ge=0)
    reassigned_types: int = Field(default=0, ge=0)
    errors: List[str] = Field(default_factory=list)
