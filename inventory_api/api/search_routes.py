from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from inventory_api.core.storage import DocumentStore, get_store
from inventory_api.services.search_services import SearchService


router = APIRouter(prefix="/api", tags=["search"])


def get_search_service(store: DocumentStore = Depends(get_store)) -> SearchService:
    return SearchService(store)


@router.get("/search")
def search(q: Optional[str] = None, svc: SearchService = Depends(get_search_service)):
    """Search products (name/category) and orders (customer name/serial number)."""
    return svc.search(q)
