from inventory_api.models.document_models import Document
from inventory_api.models.product_models import Product
from typing import List, Optional


def matches_query(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name or category."""
    qq = query.lower()
    return qq in product.name.lower() or qq in (product.category or "").lower()


class ProductRepository:
    """Access to the product collection of a loaded document (linear scans)."""

    def __init__(self, document: Document):
        self.document = document

    def get(self, product_id: Optional[str]) -> Optional[Product]:
        """Get a product by its ID."""
        return next((p for p in self.document.products if p.id == product_id), None)

    def list(
        self,
        q: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Product]:
        """
        List products, in insertion order.
        `q` matches name/category as a substring, `category` must match exactly;
        both ignore case and combine with AND.
        """
        items = list(self.document.products)
        if q:
            items = [p for p in items if matches_query(p, q)]
        if category:
            wanted = category.lower()
            items = [p for p in items if (p.category or "").lower() == wanted]
        return items

    # ---------- CREATE ----------
    def add(self, product: Product) -> Product:
        self.document.products.append(product)
        return product
