from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from inventory_api.models.order_models import Order
from inventory_api.models.product_models import Product


class Document(BaseModel):
    """Root of the persisted state: both collections, in insertion order."""

    model_config = ConfigDict(extra="allow")

    products: List[Product] = Field(default_factory=list)
    orders: List[Order] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Document":
        return cls(products=[], orders=[])

    def to_dict(self) -> dict:
        data = dict(self.model_extra or {})
        data["products"] = [p.to_dict() for p in self.products]
        data["orders"] = [o.to_dict() for o in self.orders]
        return data
