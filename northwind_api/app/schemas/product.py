"""
Pydantic schemas for products.

A product is identified by a unique integer ``id`` and carries a
display ``name`` and a unit ``price``.  ``ProductRead`` is what the API
returns; ``ProductSeed`` describes rows loaded into the in-memory store
at start-up, where the id may be left for the store to assign.
"""

from typing import Optional

from pydantic import BaseModel, Field

# SQLite INTEGER is a signed 64-bit value.
MIN_PRODUCT_ID = -(2**63)
MAX_PRODUCT_ID = 2**63 - 1


class ProductSeed(BaseModel):
    """Schema for a product row loaded into the store."""

    id: Optional[int] = Field(
        None,
        ge=MIN_PRODUCT_ID,
        le=MAX_PRODUCT_ID,
        description="Unique product identifier; assigned by the store if omitted",
    )
    name: str = Field(..., description="Product name")
    price: float = Field(..., allow_inf_nan=False, description="Unit price")


class ProductRead(BaseModel):
    """Schema for reading a product."""

    id: int
    name: str
    price: float = Field(..., allow_inf_nan=False)
