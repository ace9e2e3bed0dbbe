"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopdesk.domain.model.product import Product
from shopdesk.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, active_only: bool = False) -> list[Product]:
        """The catalog ordered by SKU, optionally without inactive products."""
        products = self._product_repo.list_all()
        if active_only:
            products = [p for p in products if p.active]
        return sorted(products, key=lambda p: p.sku)
