from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog entry as persisted in the document (camelCase on disk and on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    price: float = 0
    warranty_months: int = Field(0, alias="warrantyMonths")
    category: str = "General"
    stock: int = 0
    image: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return data
