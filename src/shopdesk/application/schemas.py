"""Pydantic request schemas — the validation gate in front of the use cases.

A payload either comes out of ``parse_request`` as a well-typed model or
the call fails with the domain ``ValidationError`` carrying field-level
details.  Optional-field defaults (``qty``, ``party_size``, reservation
``status``) are declared here and nowhere else.

Fields accept both snake_case names and the camelCase keys of the JSON
contract (``customerId``, ``startAt``...).
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

import pydantic
from pydantic import BaseModel, Field

from shopdesk.domain.exceptions import ValidationError

_CONFIG = {"populate_by_name": True, "str_strip_whitespace": True}

M = TypeVar("M", bound=BaseModel)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderItemRequest(BaseModel):
    model_config = _CONFIG

    product_id: str = Field(..., min_length=1, alias="productId")
    qty: int = Field(1, gt=0, strict=True)


class OrderCreateRequest(BaseModel):
    model_config = {
        **_CONFIG,
        "json_schema_extra": {
            "examples": [
                {
                    "customerId": "c0ffee",
                    "items": [{"productId": "p1", "qty": 2}, {"productId": "p2"}],
                }
            ]
        },
    }

    customer_id: str = Field(..., min_length=1, alias="customerId")
    items: list[OrderItemRequest] = Field(..., min_length=1)


class OrderStatusPatch(BaseModel):
    model_config = _CONFIG

    status: Literal["PAID", "CANCELLED"]


# ---------------------------------------------------------------------------
# Reservations
# ---------------------------------------------------------------------------
class ReservationCreateRequest(BaseModel):
    model_config = _CONFIG

    customer_id: str = Field(..., min_length=1, alias="customerId")
    # Kept as text: an unparseable timestamp is reported as InvalidDate.
    start_at: str = Field(..., min_length=1, alias="startAt")
    end_at: str = Field(..., min_length=1, alias="endAt")
    party_size: int = Field(1, gt=0, strict=True, alias="partySize")
    status: Literal["PENDING", "CONFIRMED", "CANCELLED"] = "PENDING"
    notes: str | None = None


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class CustomerCreateRequest(BaseModel):
    model_config = _CONFIG

    email: str = Field(..., max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    name: str = Field(..., min_length=1, max_length=200)
    phone: str | None = Field(None, max_length=30)
    notes: str | None = None


class ProductCreateRequest(BaseModel):
    model_config = _CONFIG

    sku: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    price_cents: int = Field(..., ge=0, strict=True, alias="priceCents")
    active: bool = True


class ProductUpdateRequest(BaseModel):
    model_config = _CONFIG

    price_cents: int | None = Field(None, ge=0, strict=True, alias="priceCents")
    active: bool | None = None


# ---------------------------------------------------------------------------
# Gate
# ---------------------------------------------------------------------------
def parse_request(model: type[M], payload: Any) -> M:
    """Validate ``payload`` against ``model`` or raise ValidationError."""
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        details = [
            {
                "path": [str(part) for part in err["loc"]],
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        summary = "; ".join(
            f"{'.'.join(d['path']) or model.__name__}: {d['message']}" for d in details
        )
        raise ValidationError(f"Invalid {model.__name__}: {summary}", details=details) from exc
