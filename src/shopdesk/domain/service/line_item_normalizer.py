"""Domain service: Line-Item Normalizer.

Turns the lines a caller asked for into priced, deduplicated order items.
Everything is validated before anything is built, so a bad line rejects
the whole request and no partial order can come out of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from shopdesk.domain.exceptions import (
    InvalidProductInItems,
    InvalidQty,
    InvalidUnitCents,
    ProductInactive,
    ProductPriceMissing,
    ValidationError,
)
from shopdesk.domain.model.order import OrderItem
from shopdesk.domain.model.product import Product
from shopdesk.domain.model.value_objects import is_strict_int
from shopdesk.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class RequestedLine:
    product_id: str
    qty: int


@dataclass(frozen=True)
class _FrozenLine:
    product: Product
    qty: int
    unit_cents: int


class LineItemNormalizer:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def normalize(self, lines: Sequence[RequestedLine]) -> list[OrderItem]:
        """Price-freeze and merge ``lines``.

        Steps:
        1. Batch-load every distinct product (one lookup).
        2. Reject unknown products, then inactive ones.
        3. Copy each product's *current* price onto its line.
        4. Validate price and quantity of every line.
        5. Merge lines for the same product, keeping first-seen order.
        """
        if not lines:
            raise ValidationError("Order must contain at least one item")

        product_ids = list(dict.fromkeys(line.product_id for line in lines))
        products = {p.id: p for p in self._product_repo.get_many(product_ids)}

        if len(products) < len(product_ids):
            missing = [pid for pid in product_ids if pid not in products]
            raise InvalidProductInItems(missing)

        for pid in product_ids:
            if not products[pid].active:
                raise ProductInactive(pid)

        frozen = [
            _FrozenLine(
                product=products[line.product_id],
                qty=line.qty,
                unit_cents=products[line.product_id].price_cents,
            )
            for line in lines
        ]
        for line in frozen:
            self._validate(line)

        return self._merge(frozen)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(line: _FrozenLine) -> None:
        pid = line.product.id
        if line.unit_cents is None:
            raise ProductPriceMissing(pid)
        if not is_strict_int(line.unit_cents) or line.unit_cents < 0:
            raise InvalidUnitCents(pid)
        if not is_strict_int(line.qty) or line.qty <= 0:
            raise InvalidQty(pid)

    @staticmethod
    def _merge(lines: list[_FrozenLine]) -> list[OrderItem]:
        merged: dict[str, OrderItem] = {}
        for line in lines:
            pid = line.product.id
            previous = merged.get(pid)
            qty = line.qty + previous.qty if previous else line.qty
            merged[pid] = OrderItem(
                product_id=pid,
                product_name=line.product.name,
                sku=line.product.sku,
                qty=qty,
                unit_cents=line.unit_cents,
            )
        return list(merged.values())
