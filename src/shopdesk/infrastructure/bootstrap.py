"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  ``init`` is called once
per process by the CLI entry point; the settings it receives are the ones
every handler built here will use.
"""

from __future__ import annotations

from shopdesk.infrastructure.config import Settings
from shopdesk.infrastructure.logging import configure_logging
from shopdesk.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from shopdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopdesk.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopdesk.infrastructure.persistence.json_reservation_repository import (
    JsonReservationRepository,
)

_settings: Settings | None = None


def init(settings: Settings) -> Settings:
    global _settings
    _settings = settings
    configure_logging(settings.log_level, settings.log_json)
    return settings


def settings() -> Settings:
    if _settings is None:
        return init(Settings.from_env())
    return _settings


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(settings().data_dir / "customers.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def reservation_repository() -> JsonReservationRepository:
    return JsonReservationRepository(settings().data_dir / "reservations.json")
