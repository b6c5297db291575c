from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from inventory_api.models.product import INTEGER_MIN, INTEGER_MAX, PRICE_MAX


class ProductPayload(BaseModel):
    """Request body for creating or replacing a product."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")
    quantity: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, description="Units in stock")
    price: float = Field(
        ...,
        ge=-PRICE_MAX,
        le=PRICE_MAX,
        allow_inf_nan=False,
        description="Unit price, rounded to two decimals"
    )
    description: Optional[str] = Field(None, description="Optional description")

    @field_validator("price")
    @classmethod
    def round_price(cls, value: float) -> float:
        return round(value, 2)

    @field_validator("description")
    @classmethod
    def blank_description_is_null(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    category: str
    quantity: int
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductCreated(BaseModel):
    id: int
    message: str


class Message(BaseModel):
    message: str


class StatsResponse(BaseModel):
    """Aggregate figures over the whole inventory."""
    total_products: int
    total_items: int
    categories: int
    total_value: float
