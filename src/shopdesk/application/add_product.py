"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.schemas import ProductCreateRequest, parse_request
from shopdesk.domain.exceptions import DuplicateEntityError
from shopdesk.domain.model.product import Product
from shopdesk.domain.model.value_objects import new_id
from shopdesk.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, payload: Mapping[str, Any] | ProductCreateRequest) -> Product:
        """Add a new product to the catalog."""
        request = parse_request(ProductCreateRequest, payload)

        if self._product_repo.get_by_sku(request.sku) is not None:
            raise DuplicateEntityError("SKU already exists")

        product = Product(
            id=new_id(),
            sku=request.sku,
            name=request.name,
            price_cents=request.price_cents,
            active=request.active,
            description=request.description,
        )
        self._product_repo.save(product)
        logger.info("Product added", product_id=product.id, sku=product.sku)
        return product
