"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the outer layers can catch them uniformly.  Each class carries the
machine-readable ``code`` callers see, and a ``category`` that an adapter
maps to a transport status (see ``HTTP_STATUS``).
"""

from __future__ import annotations

from typing import Any

VALIDATION = "validation"
CONFLICT = "conflict"
REFERENTIAL = "referential"
NOT_FOUND = "not_found"


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DomainError"
    category = VALIDATION

    def __init__(self, message: str = "", **context: Any) -> None:
        super().__init__(message or self.code)
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        payload.update(self.context)
        return payload


# --- Validation --------------------------------------------------------------


class ValidationError(DomainException):
    """A business rule or invariant was violated, or input was malformed."""

    code = "ValidationError"

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        if details is None:
            details = [{"message": message}]
        super().__init__(message, details=details)

    @property
    def details(self) -> list[dict]:
        return self.context["details"]


class InvalidProductInItems(DomainException):
    code = "InvalidProductInItems"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Unknown product(s) in items: {', '.join(missing)}", productIds=missing
        )
        self.missing = missing


class ProductInactive(DomainException):
    code = "ProductInactive"
    category = CONFLICT

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' is inactive", productId=product_id)
        self.product_id = product_id


class _LineError(DomainException):
    def __init__(self, product_id: str, message: str) -> None:
        super().__init__(message, productId=product_id)
        self.product_id = product_id


class ProductPriceMissing(_LineError):
    code = "ProductPriceMissing"

    def __init__(self, product_id: str) -> None:
        super().__init__(product_id, f"Product '{product_id}' has no price")


class InvalidUnitCents(_LineError):
    code = "InvalidUnitCents"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            product_id,
            f"Product '{product_id}' price must be a non-negative integer",
        )


class InvalidQty(_LineError):
    code = "InvalidQty"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            product_id, f"Quantity for product '{product_id}' must be a positive integer"
        )


class InvalidDate(DomainException):
    code = "InvalidDate"


class StartNotBeforeEnd(DomainException):
    code = "startAt_must_be_before_endAt"

    def __init__(self) -> None:
        super().__init__("startAt must be before endAt")


# --- Referential -------------------------------------------------------------


class InvalidCustomerOrProduct(DomainException):
    code = "InvalidCustomerOrProduct"
    category = REFERENTIAL


class InvalidCustomer(DomainException):
    code = "InvalidCustomer"
    category = REFERENTIAL


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NotFound"
    category = NOT_FOUND


class OrderNotFound(EntityNotFoundError):
    code = "OrderNotFound"

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order '{order_id}' not found")
        self.order_id = order_id


# --- Conflicts ---------------------------------------------------------------


class InvalidStatusTransition(DomainException):
    code = "InvalidStatusTransition"
    category = CONFLICT

    def __init__(self, from_: str, to: str) -> None:
        super().__init__(
            f"Cannot change order status from {from_} to {to}",
            **{"from": from_, "to": to},
        )
        self.from_ = from_
        self.to = to


class OverlappingReservation(DomainException):
    code = "OverlappingReservation"
    category = CONFLICT

    def __init__(self, conflicting_id: str) -> None:
        super().__init__(
            f"Overlaps active reservation '{conflicting_id}'",
            reservationId=conflicting_id,
        )
        self.conflicting_id = conflicting_id


class DuplicateEntityError(DomainException):
    """A unique key (customer email, product SKU) is already taken."""

    code = "Conflict"
    category = CONFLICT

    def __init__(self, message: str) -> None:
        super().__init__(message, details=message)


# --- Transport mapping -------------------------------------------------------

HTTP_STATUS = {
    VALIDATION: 400,
    REFERENTIAL: 400,
    NOT_FOUND: 404,
    CONFLICT: 409,
}

# ProductInactive is a business rule but is answered like a bad request.
_HTTP_STATUS_BY_CODE = {ProductInactive.code: 400}


def http_status_for(exc: DomainException) -> int:
    return _HTTP_STATUS_BY_CODE.get(exc.code, HTTP_STATUS[exc.category])
