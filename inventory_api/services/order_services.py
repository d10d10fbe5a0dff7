# inventory_api/services/order_services.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from inventory_api.core.dates import add_months, isoformat, utcnow
from inventory_api.core.ids import generate_id
from inventory_api.core.storage import DocumentStore
from inventory_api.models.order_models import Order, OrderStatus
from inventory_api.repositories.order_repositories import OrderRepository
from inventory_api.repositories.product_repositories import ProductRepository
from inventory_api.schemas.order_schemas import OrderCreate
from inventory_api.services.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business layer for orders.
    - Creation only checks stock; it is decremented at approval.
    - Approval is guarded (PENDING only), rejection is not.
    """

    def __init__(self, store: DocumentStore, clock: Callable = utcnow):
        self.store = store
        self.clock = clock

    # ==========================================================
    # === Read =================================================
    # ==========================================================

    def list_orders(self, status: Optional[str] = None) -> List[dict]:
        """Orders (optionally filtered by status) with their product embedded."""
        document = self.store.load()
        products = ProductRepository(document)
        out = []
        for order in OrderRepository(document).list(status=status):
            product = products.get(order.product_id)
            item = order.to_dict()
            item["product"] = product.to_dict() if product else None
            out.append(item)
        return out

    # ==========================================================
    # === Create ===============================================
    # ==========================================================

    def create_order(self, order_in: OrderCreate) -> Order:
        if not (order_in.name and order_in.phone and order_in.product_id and order_in.quantity):
            raise BadRequestError("Missing fields")
        if order_in.quantity < 0:
            raise BadRequestError("Quantity must be a positive integer")

        document = self.store.load()
        product = ProductRepository(document).get(order_in.product_id)
        if not product:
            raise NotFoundError("Product not found")

        # no reservation: concurrent pending orders may overcommit stock
        if product.stock < order_in.quantity:
            raise BadRequestError("Not enough stock")

        order = Order(
            id=generate_id("ord_"),
            name=order_in.name,
            phone=order_in.phone,
            product_id=product.id,
            quantity=order_in.quantity,
            serial_number=order_in.serial_number or None,
            status=OrderStatus.PENDING,
            created_at=isoformat(self.clock()),
        )
        OrderRepository(document).add(order)
        self.store.save(document)

        logger.info("order created", extra={"order_id": order.id, "product_id": product.id, "quantity": order.quantity})
        return order

    # ==========================================================
    # === Status transitions ===================================
    # ==========================================================

    def approve_order(self, order_id: str) -> Order:
        """
        PENDING -> APPROVED. Re-checks stock, decrements it and computes the
        warranty expiry as approvedAt + product.warrantyMonths calendar months.
        """
        document = self.store.load()
        order = OrderRepository(document).get(order_id)
        if not order:
            raise NotFoundError("Order not found")
        if order.status != OrderStatus.PENDING:
            raise BadRequestError("Order not pending")

        product = ProductRepository(document).get(order.product_id)
        if not product:
            raise NotFoundError("Product not found for order")
        if (product.stock or 0) < order.quantity:
            raise BadRequestError("Insufficient stock")

        product.stock -= order.quantity

        approved_at = self.clock()
        warranty_expiry = None
        if product.warranty_months and product.warranty_months > 0:
            warranty_expiry = isoformat(add_months(approved_at, product.warranty_months))

        order.status = OrderStatus.APPROVED
        order.approved_at = isoformat(approved_at)
        order.warranty_expiry = warranty_expiry

        self.store.save(document)
        logger.info(
            "order approved",
            extra={"order_id": order.id, "product_id": product.id, "stock": product.stock},
        )
        return order

    def reject_order(self, order_id: str) -> Order:
        """Any status -> REJECTED. Stock is left untouched, even for approved orders."""
        document = self.store.load()
        order = OrderRepository(document).get(order_id)
        if not order:
            raise NotFoundError("Order not found")

        if order.status != OrderStatus.PENDING:
            logger.warning("rejecting non-pending order", extra={"order_id": order.id, "from": order.status.value})

        order.status = OrderStatus.REJECTED
        order.rejected_at = isoformat(self.clock())

        self.store.save(document)
        logger.info("order rejected", extra={"order_id": order.id})
        return order
