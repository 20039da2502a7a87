"""Grocery type ORM model."""
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from pantry_ingestion.db.base import Base, UUIDMixin
from typing import Optional, TYPE_CHECKING
import uuid

if TYPE_CHECKING:
    from pantry_ingestion.db.models.grocery_category import GroceryCategory


class GroceryType(Base, UUIDMixin):
    """A kind of item that can be stocked or bought (e.g. "Cheddar")."""
    
    __tablename__ = "grocery_types"
    
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    category_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        ForeignKey("grocery_categories.id"),
        nullable=True,
        index=True,
    )
    default_store_id: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    
    category: Mapped[Optional["GroceryCategory"]] = relationship(
        back_populates="grocery_types"
    )
    
    def __repr__(self) -> str:
        return f"<GroceryType(id={self.id}, name='{self.name}', category_id={self.category_id})>"
