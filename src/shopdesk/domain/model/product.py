"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are switched off in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopdesk.domain.exceptions import ValidationError
from shopdesk.domain.model.value_objects import is_strict_int


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price and availability changes are
    legitimate mutations on the aggregate.  ``price_cents`` may be None for
    rows that were stored without a price; such products cannot be ordered.
    """

    id: str
    sku: str
    name: str
    price_cents: int | None
    active: bool = True
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_price(self, new_price_cents: int) -> None:
        """Change the catalog price.

        This does NOT affect any existing orders because order items
        capture a price snapshot at creation time.
        """
        if not is_strict_int(new_price_cents) or new_price_cents < 0:
            raise ValidationError("Product price must be a non-negative integer of cents")
        self.price_cents = new_price_cents

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False
