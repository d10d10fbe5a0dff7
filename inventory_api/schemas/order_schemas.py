from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderCreate(BaseModel):
    """Customer order body. Required fields are checked by the service so a
    missing one yields `Missing fields` rather than a schema error."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    product_id: Optional[str] = Field(None, alias="productId")
    quantity: Optional[int] = None
    serial_number: Optional[str] = Field(None, alias="serialNumber")
