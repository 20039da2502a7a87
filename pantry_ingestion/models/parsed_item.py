"""Pydantic models for rows parsed from import files."""
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal


class ParsedGroceryTypeRow(BaseModel):
    """A grocery type name read from the grocery types export."""
    
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Grocery type display name"
    )
    row_number: int = Field(
        ...,
        ge=1,
        description="1-indexed source row, for log messages"
    )
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError('name cannot be empty or whitespace')
        return v


class ParsedGroceryListRow(BaseModel):
    """A grocery list name read from the grocery lists export."""

    name: str = Field(..., min_length=1, max_length=255)
    row_number: int = Field(..., ge=1)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('name cannot be empty or whitespace')
        return v


class ParsedGroceryListItemRow(BaseModel):
    """A (grocery list, grocery type) pairing read from the list items export."""
    
    list_name: str = Field(..., min_length=1, max_length=255)
    type_name: str = Field(..., min_length=1, max_length=255)
    quantity: Decimal = Field(
        default=Decimal("1"),
        gt=0,
        description="Amount to buy, defaults to 1"
    )
    unit: str = Field(
        default="item",
        min_length=1,
        max_length=50,
        description="Unit of quantity, defaults to 'item'"
    )
    row_number: int = Field(..., ge=1)
    
    @field_validator('list_name', 'type_name', 'unit')
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('value cannot be empty or whitespace')
        return v
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "list_name": "Weekly Staples",
                "type_name": "Milk",
                "quantity": "2",
                "unit": "litre",
                "row_number": 2
            }
        }
    }
