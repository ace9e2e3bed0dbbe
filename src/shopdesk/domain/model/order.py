"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  Prices, tax rate and
currency are frozen when the order is created; afterwards the only thing
that may change is ``status``, and only along the transitions listed in
``ORDER_TRANSITIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from shopdesk.domain.exceptions import InvalidStatusTransition, ValidationError
from shopdesk.domain.model.money import compute_totals
from shopdesk.domain.model.value_objects import new_id


class OrderStatus(Enum):
    OPEN = "OPEN"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


# PAID and CANCELLED are sinks.
ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.OPEN: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def _coerce_status(value: OrderStatus | str) -> OrderStatus | None:
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        return None


def can_transition(from_: OrderStatus | str, to: OrderStatus | str) -> bool:
    """Whether an order in ``from_`` may move to ``to``.

    Unknown statuses on either side are never allowed.
    """
    source = _coerce_status(from_)
    target = _coerce_status(to)
    if source is None or target is None:
        return False
    return target in ORDER_TRANSITIONS[source]


@dataclass(frozen=True)
class OrderItem:
    """One priced line of an order.

    ``unit_cents`` is a copy of the catalog price at creation time and is
    never looked up again.
    """

    product_id: str
    product_name: str
    sku: str
    qty: int
    unit_cents: int

    @property
    def line_cents(self) -> int:
        return self.unit_cents * self.qty


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders — it computes the
    totals.  The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without recomputing anything.
    """

    id: str
    customer_id: str
    items: list[OrderItem]
    subtotal_cents: int
    tax_rate: Decimal
    tax_cents: int
    total_cents: int
    currency_code: str
    status: OrderStatus = OrderStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        items: list[OrderItem],
        tax_rate: Decimal,
        currency_code: str,
    ) -> Order:
        """Create a new OPEN order stamped with the given tax rate and currency."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer id is required")

        totals = compute_totals(items, tax_rate)
        now = datetime.now(timezone.utc)
        return Order(
            id=new_id(),
            customer_id=customer_id.strip(),
            items=list(items),
            subtotal_cents=totals.subtotal_cents,
            tax_rate=tax_rate,
            tax_cents=totals.tax_cents,
            total_cents=totals.total_cents,
            currency_code=currency_code,
            status=OrderStatus.OPEN,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus | str) -> None:
        """Move to ``target`` or raise InvalidStatusTransition."""
        if not can_transition(self.status, target):
            to = target.value if isinstance(target, OrderStatus) else str(target)
            raise InvalidStatusTransition(self.status.value, to)
        self.status = _coerce_status(target)
        self.updated_at = datetime.now(timezone.utc)
