"""Grocery list and grocery list item ORM models."""
from decimal import Decimal
from sqlalchemy import String, ForeignKey, Numeric, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from pantry_ingestion.db.base import Base, UUIDMixin
from typing import List
import uuid


class GroceryList(Base, UUIDMixin):
    """A named reusable list of grocery types (e.g. "Weekly Staples")."""
    
    __tablename__ = "grocery_lists"
    
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    
    items: Mapped[List["GroceryListItem"]] = relationship(
        back_populates="grocery_list",
        cascade="all, delete-orphan",
    )
    
    def __repr__(self) -> str:
        return f"<GroceryList(id={self.id}, name='{self.name}')>"


class GroceryListItem(Base, UUIDMixin):
    """One grocery type with quantity on a grocery list."""
    
    __tablename__ = "grocery_list_items"
    
    list_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("grocery_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    grocery_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("grocery_types.id"),
        nullable=False,
        index=True,
    )
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=1)
    unit: Mapped[str] = mapped_column(String(50), nullable=False, default="item")
    is_purchased: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    
    grocery_list: Mapped["GroceryList"] = relationship(back_populates="items")
    
    def __repr__(self) -> str:
        return (
            f"<GroceryListItem(id={self.id}, list_id={self.list_id}, "
            f"grocery_type_id={self.grocery_type_id}, quantity={self.quantity})>"
        )
