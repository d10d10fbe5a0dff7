# inventory_api/services/product_services.py
from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional

from inventory_api.core.config import settings
from inventory_api.core.dates import isoformat, utcnow
from inventory_api.core.ids import generate_filename, generate_id
from inventory_api.core.storage import DocumentStore
from inventory_api.infra.blobs.contracts import BlobStore
from inventory_api.models.product_models import Product
from inventory_api.repositories.product_repositories import ProductRepository
from inventory_api.schemas.product_schemas import ProductCreate
from inventory_api.services.errors import BadRequestError, InternalError, NotFoundError

logger = logging.getLogger(__name__)


def to_number(value, default: float = 0) -> float:
    """
    Lenient numeric coercion, as a JS form handler would read it: absent,
    blank or unparseable values give `default`. Digit separators ("1_000")
    are unparseable; unsigned 0x/0o/0b literals are accepted.
    """
    if value is None or isinstance(value, bool):
        return default
    text = str(value).strip()
    if not text or "_" in text:
        return default
    try:
        if text[:2].lower() in ("0x", "0o", "0b"):
            number = float(int(text, 0))
        else:
            number = float(text)
    except ValueError:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_int(value, default: int = 0) -> int:
    return int(to_number(value, default))


class ProductService:
    """
    Business rules for the catalog.
    Each operation loads the whole document, mutates it and saves it back.
    """

    def __init__(
        self,
        store: DocumentStore,
        blobs: BlobStore,
        clock: Callable = utcnow,
    ):
        self.store = store
        self.blobs = blobs
        self.clock = clock

    # ==========================================================
    # === Read =================================================
    # ==========================================================

    def list_products(self, q: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
        repo = ProductRepository(self.store.load())
        return repo.list(q=q, category=category)

    def get_product(self, product_id: str) -> Product:
        product = ProductRepository(self.store.load()).get(product_id)
        if not product:
            logger.debug("product not found", extra={"product_id": product_id})
            raise NotFoundError("Product not found")
        return product

    # ==========================================================
    # === Create ===============================================
    # ==========================================================

    def create_product(
        self,
        form: ProductCreate,
        image_name: Optional[str] = None,
        image_data: Optional[bytes] = None,
    ) -> Product:
        """
        Registers a product. The image (if any) is stored first under a generated
        name keeping its extension; a later document write failure leaves it orphaned.
        """
        if not form.name:
            raise BadRequestError("Product name required")

        try:
            image_url = None
            if image_name:
                filename = generate_filename(image_name)
                self.blobs.put(filename, image_data or b"")
                image_url = settings.upload_url(filename)

            document = self.store.load()
            product = Product(
                id=generate_id("prod_"),
                name=form.name,
                price=to_number(form.price),
                warranty_months=to_int(form.warranty_months),
                category=form.category if form.category is not None else "General",
                stock=to_int(form.initial_stock),
                image=image_url,
                created_at=isoformat(self.clock()),
            )
            ProductRepository(document).add(product)
            self.store.save(document)
        except (OSError, ValueError) as e:
            logger.exception("[product.create] upload failed: %s", e)
            raise InternalError("Upload failed")

        logger.info("product created", extra={"product_id": product.id, "image": product.image})
        return product

    # ==========================================================
    # === Stock ================================================
    # ==========================================================

    def adjust_stock(self, product_id: Optional[str], add_quantity) -> Product:
        """Adds a (possibly negative) delta to the stock; the result is not clamped."""
        document = self.store.load()
        product = ProductRepository(document).get(product_id)
        if not product:
            raise NotFoundError("Product not found")

        delta = to_int(add_quantity)
        product.stock = (product.stock or 0) + delta
        self.store.save(document)

        logger.info("stock updated", extra={"product_id": product.id, "delta": delta, "stock": product.stock})
        return product
