from inventory_api.models.document_models import Document
from inventory_api.models.order_models import Order
from typing import List, Optional


def matches_query(order: Order, query: str) -> bool:
    """Case-insensitive substring match on customer name or serial number."""
    qq = query.lower()
    return bool(
        (order.name and qq in order.name.lower())
        or (order.serial_number and qq in order.serial_number.lower())
    )


class OrderRepository:
    """Access to the order collection of a loaded document (linear scans)."""

    def __init__(self, document: Document):
        self.document = document

    def get(self, order_id: str) -> Optional[Order]:
        """Get an order by its ID."""
        return next((o for o in self.document.orders if o.id == order_id), None)

    def list(self, status: Optional[str] = None) -> List[Order]:
        """List orders in insertion order, optionally with an exact status."""
        orders = list(self.document.orders)
        if status:
            orders = [o for o in orders if o.status.value == status]
        return orders

    # ---------- CREATE ----------
    def add(self, order: Order) -> Order:
        self.document.orders.append(order)
        return order
