from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from inventory_api.core.storage import DocumentStore, get_store
from inventory_api.schemas.order_schemas import OrderCreate
from inventory_api.services.order_services import OrderService


router = APIRouter(prefix="/api", tags=["orders"])
logger = logging.getLogger(__name__)


# ---------- Dependency injection ----------
def get_order_service(store: DocumentStore = Depends(get_store)) -> OrderService:
    return OrderService(store)


# ---------- Customer ----------

@router.post("/orders")
def create_order(order_in: Optional[OrderCreate] = None, svc: OrderService = Depends(get_order_service)):
    """Place an order. It stays PENDING until an admin approves or rejects it."""
    order_in = order_in or OrderCreate()
    order = svc.create_order(order_in)
    return {"message": "Order placed (pending admin approval)", "order": order.to_dict()}


# ---------- Admin ----------

@router.get("/admin/orders", tags=["admin"])
def list_orders(status: Optional[str] = None, svc: OrderService = Depends(get_order_service)):
    """List orders with their product embedded, optionally filtered by status."""
    return svc.list_orders(status=status)


@router.post("/admin/orders/{order_id}/approve", tags=["admin"])
def approve_order(order_id: str, svc: OrderService = Depends(get_order_service)):
    logger.info("Approving order %s", order_id)
    order = svc.approve_order(order_id)
    return {"message": "Order approved", "order": order.to_dict()}


@router.post("/admin/orders/{order_id}/reject", tags=["admin"])
def reject_order(order_id: str, svc: OrderService = Depends(get_order_service)):
    logger.info("Rejecting order %s", order_id)
    order = svc.reject_order(order_id)
    return {"message": "Order rejected", "order": order.to_dict()}
