from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Admin product form, as received: numeric fields are still raw strings."""

    name: Optional[str] = None
    price: Optional[str] = None
    warranty_months: Optional[str] = None
    category: Optional[str] = None
    initial_stock: Optional[str] = None


class StockAdjust(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    product_id: Optional[str] = Field(None, alias="productId")
    add_quantity: Optional[str] = Field(None, alias="addQuantity")
