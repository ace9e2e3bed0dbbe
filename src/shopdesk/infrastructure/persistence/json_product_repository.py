"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from shopdesk.domain.model.product import Product
from shopdesk.domain.repository.product_repository import ProductRepository
from shopdesk.infrastructure.persistence.json_file_store import JsonFileStore


class JsonProductRepository(JsonFileStore, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_many(self, product_ids: Iterable[str]) -> list[Product]:
        products = self._load()
        wanted = dict.fromkeys(product_ids)
        return [products[pid] for pid in wanted if pid in products]

    def get_by_sku(self, sku: str) -> Product | None:
        for product in self._load().values():
            if product.sku == sku:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._transaction() as records:
            self._upsert(records, self._to_raw(product))

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {item["id"]: self._decode(item) for item in self._load_raw()}

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "sku": p.sku,
            "name": p.name,
            "description": p.description,
            "price_cents": p.price_cents,
            "active": p.active,
            "created_at": p.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(item: dict) -> Product:
        return Product(
            id=item["id"],
            sku=item["sku"],
            name=item["name"],
            price_cents=item.get("price_cents"),
            active=item.get("active", True),
            description=item.get("description"),
            created_at=datetime.fromisoformat(item["created_at"]),
        )
