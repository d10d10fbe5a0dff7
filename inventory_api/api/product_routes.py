from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from inventory_api.core.storage import DocumentStore, get_store
from inventory_api.infra.blobs.contracts import BlobStore
from inventory_api.infra.blobs.local import get_blob_store
from inventory_api.schemas.product_schemas import ProductCreate, StockAdjust
from inventory_api.services.product_services import ProductService


router = APIRouter(prefix="/api", tags=["products"])
logger = logging.getLogger(__name__)


# ---------- Dependency injection ----------
def get_product_service(
    store: DocumentStore = Depends(get_store),
    blobs: BlobStore = Depends(get_blob_store),
) -> ProductService:
    """Builds a ProductService on the document store + upload blob store."""
    return ProductService(store, blobs)


# ---------- Catalog ----------

@router.get("/products")
def list_products(
    q: Optional[str] = None,
    category: Optional[str] = None,
    svc: ProductService = Depends(get_product_service),
):
    """List products, filtered by `q` (name/category substring) and/or `category`."""
    return [p.to_dict() for p in svc.list_products(q=q, category=category)]


@router.get("/products/{product_id}")
def get_product(product_id: str, svc: ProductService = Depends(get_product_service)):
    return svc.get_product(product_id).to_dict()


# ---------- Admin ----------

def _text(value) -> Optional[str]:
    return value if isinstance(value, str) else None


@router.post("/admin/product", tags=["admin"])
async def create_product(request: Request, svc: ProductService = Depends(get_product_service)):
    """
    Register a product (multipart form, optional `image` file).
    Read from the raw form: an empty field stays "" and only an absent
    `category` falls back to "General".
    """
    data = await request.form()
    form = ProductCreate(
        name=_text(data.get("name")),
        price=_text(data.get("price")),
        warranty_months=_text(data.get("warrantyMonths")),
        category=_text(data.get("category")),
        initial_stock=_text(data.get("initialStock")),
    )
    logger.info("Creating product %s", form.name)

    image_name = image_data = None
    image = data.get("image")
    if isinstance(image, UploadFile) and image.filename:
        image_name = image.filename
        image_data = await image.read()

    product = await run_in_threadpool(
        svc.create_product, form, image_name=image_name, image_data=image_data
    )
    return {"message": "Product added", "product": product.to_dict()}


@router.post("/admin/stock", tags=["admin"])
def adjust_stock(body: Optional[StockAdjust] = None, svc: ProductService = Depends(get_product_service)):
    """Add `addQuantity` (may be negative) to a product's stock."""
    body = body or StockAdjust()
    product = svc.adjust_stock(body.product_id, body.add_quantity)
    return {"message": "Stock updated", "product": product.to_dict()}
