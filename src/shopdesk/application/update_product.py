"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.schemas import ProductUpdateRequest, parse_request
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.domain.model.product import Product
from shopdesk.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, product_id: str, payload: Mapping[str, Any] | ProductUpdateRequest
    ) -> Product:
        """Update a product's price and/or availability.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        request = parse_request(ProductUpdateRequest, payload)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if request.price_cents is not None:
            product.update_price(request.price_cents)
        if request.active is True:
            product.activate()
        elif request.active is False:
            product.deactivate()

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            product_id=product.id,
            price_cents=product.price_cents,
            active=product.active,
        )
        return product
