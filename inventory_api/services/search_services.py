from __future__ import annotations

from typing import Optional, Union

from inventory_api.core.storage import DocumentStore
from inventory_api.repositories import order_repositories, product_repositories


class SearchService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def search(self, q: Optional[str]) -> Union[list, dict]:
        """
        Combined substring search. An empty query yields an empty list,
        otherwise {"products": [...], "orders": [...]} in collection order.
        """
        if not q:
            return []
        document = self.store.load()
        return {
            "products": [
                p.to_dict() for p in document.products if product_repositories.matches_query(p, q)
            ],
            "orders": [
                o.to_dict() for o in document.orders if order_repositories.matches_query(o, q)
            ],
        }
