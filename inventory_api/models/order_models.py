from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Order(BaseModel):
    """
    A customer order. Starts PENDING; approval/rejection stamps the
    matching timestamp fields, which stay absent until then.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    phone: str
    product_id: str = Field(..., alias="productId")
    quantity: int
    serial_number: Optional[str] = Field(None, alias="serialNumber")
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[str] = Field(None, alias="createdAt")

    approved_at: Optional[str] = Field(None, alias="approvedAt")
    warranty_expiry: Optional[str] = Field(None, alias="warrantyExpiry")
    rejected_at: Optional[str] = Field(None, alias="rejectedAt")

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return data
