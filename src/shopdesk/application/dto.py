"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Order DTOs are
"decorated": next to the authoritative ``*_cents`` integers they carry
fractional-unit amounts and formatted strings for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from shopdesk.domain.model.customer import Customer
from shopdesk.domain.model.money import format_money, to_units
from shopdesk.domain.model.order import Order
from shopdesk.domain.model.product import Product
from shopdesk.domain.model.reservation import Reservation


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    sku: str
    qty: int
    unit_cents: int
    line_cents: int
    unit_price: str  # formatted, e.g. "5,00 €"
    line_total: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "product": {"id": self.product_id, "name": self.product_name, "sku": self.sku},
            "qty": self.qty,
            "unitCents": self.unit_cents,
            "lineCents": self.line_cents,
            "unitPriceFormatted": self.unit_price,
            "lineTotalFormatted": self.line_total,
        }


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    status: str
    items: list[OrderItemDTO]
    subtotal_cents: int
    tax_rate: Decimal
    tax_cents: int
    total_cents: int
    currency_code: str
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    subtotal_formatted: str
    tax_formatted: str
    total_formatted: str
    created_at: str
    updated_at: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "status": self.status,
            "items": [item.to_dict() for item in self.items],
            "subtotalCents": self.subtotal_cents,
            "taxRate": float(self.tax_rate),
            "taxCents": self.tax_cents,
            "totalCents": self.total_cents,
            "currencyCode": self.currency_code,
            "subtotal": float(self.subtotal),
            "tax": float(self.tax),
            "total": float(self.total),
            "subtotalFormatted": self.subtotal_formatted,
            "taxFormatted": self.tax_formatted,
            "totalFormatted": self.total_formatted,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


def to_order_dto(order: Order, locale: str) -> OrderDTO:
    """Decorate an order for display using its own stamped currency."""
    currency = order.currency_code

    def fmt(cents: int) -> str:
        return format_money(cents, currency, locale)

    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                sku=item.sku,
                qty=item.qty,
                unit_cents=item.unit_cents,
                line_cents=item.line_cents,
                unit_price=fmt(item.unit_cents),
                line_total=fmt(item.line_cents),
            )
            for item in order.items
        ],
        subtotal_cents=order.subtotal_cents,
        tax_rate=order.tax_rate,
        tax_cents=order.tax_cents,
        total_cents=order.total_cents,
        currency_code=currency,
        subtotal=to_units(order.subtotal_cents),
        tax=to_units(order.tax_cents),
        total=to_units(order.total_cents),
        subtotal_formatted=fmt(order.subtotal_cents),
        tax_formatted=fmt(order.tax_cents),
        total_formatted=fmt(order.total_cents),
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat() if order.updated_at else None,
    )


@dataclass(frozen=True)
class ReservationDTO:

    id: str
    customer_id: str
    start_at: str
    end_at: str
    party_size: int
    status: str
    notes: str | None

    @staticmethod
    def from_domain(reservation: Reservation) -> ReservationDTO:
        return ReservationDTO(
            id=reservation.id,
            customer_id=reservation.customer_id,
            start_at=reservation.start_at.isoformat(),
            end_at=reservation.end_at.isoformat(),
            party_size=reservation.party_size,
            status=reservation.status.value,
            notes=reservation.notes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "startAt": self.start_at,
            "endAt": self.end_at,
            "partySize": self.party_size,
            "status": self.status,
            "notes": self.notes,
        }


def customer_to_dict(customer: Customer) -> dict[str, Any]:
    return {
        "id": customer.id,
        "email": customer.email,
        "name": customer.name,
        "phone": customer.phone,
        "notes": customer.notes,
        "createdAt": customer.created_at.isoformat(),
    }


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "sku": product.sku,
        "name": product.name,
        "description": product.description,
        "priceCents": product.price_cents,
        "active": product.active,
        "createdAt": product.created_at.isoformat(),
    }
