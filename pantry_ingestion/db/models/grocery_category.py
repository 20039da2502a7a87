"""Grocery category ORM model."""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from pantry_ingestion.db.base import Base, UUIDMixin
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from pantry_ingestion.db.models.grocery_type import GroceryType


class GroceryCategory(Base, UUIDMixin):
    """Shopping aisle a grocery type is filed under (e.g. "Fridge")."""
    
    __tablename__ = "grocery_categories"
    
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    
    grocery_types: Mapped[List["GroceryType"]] = relationship(
        back_populates="category"
    )
    
    def __repr__(self) -> str:
        return f"<GroceryCategory(id={self.id}, name='{self.name}', sort_order={self.sort_order})>"
