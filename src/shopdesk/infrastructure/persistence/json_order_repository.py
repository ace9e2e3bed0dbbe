"""JSON-file-backed implementation of OrderRepository.

Items are stored inside their order's record, so ``add`` writes the
header and every item in the same atomic file replacement.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shopdesk.domain.exceptions import InvalidStatusTransition, OrderNotFound
from shopdesk.domain.model.order import Order, OrderItem, OrderStatus
from shopdesk.domain.repository.order_repository import OrderRepository
from shopdesk.infrastructure.persistence.json_file_store import (
    JsonFileStore,
    StoreError,
)


class JsonOrderRepository(JsonFileStore, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._decode(raw)
        return None

    def list(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        orders = [self._decode(raw) for raw in self._load_raw()]
        if customer_id is not None:
            orders = [o for o in orders if o.customer_id == customer_id]
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def add(self, order: Order) -> None:
        with self._transaction() as records:
            if any(raw["id"] == order.id for raw in records):
                raise StoreError(f"Order '{order.id}' already stored")
            records.append(self._to_raw(order))

    def update_status(self, order: Order, expected_from: OrderStatus) -> None:
        with self._transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == order.id:
                    break
            else:
                raise OrderNotFound(order.id)
            stored = self._decode(raw)
            if stored.status != expected_from:
                raise InvalidStatusTransition(stored.status.value, order.status.value)
            stored.status = order.status
            stored.updated_at = order.updated_at
            records[i] = self._to_raw(stored)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status.value,
            "subtotal_cents": order.subtotal_cents,
            "tax_rate": str(order.tax_rate),
            "tax_cents": order.tax_cents,
            "total_cents": order.total_cents,
            "currency_code": order.currency_code,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat() if order.updated_at else None,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "sku": item.sku,
                    "qty": item.qty,
                    "unit_cents": item.unit_cents,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                sku=i["sku"],
                qty=i["qty"],
                unit_cents=i["unit_cents"],
            )
            for i in raw["items"]
        ]
        updated_at = raw.get("updated_at")
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            items=items,
            subtotal_cents=raw["subtotal_cents"],
            tax_rate=Decimal(raw["tax_rate"]),
            tax_cents=raw["tax_cents"],
            total_cents=raw["total_cents"],
            currency_code=raw["currency_code"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )
