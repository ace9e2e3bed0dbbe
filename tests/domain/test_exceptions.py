"""Tests for error bodies and their transport status mapping."""

import pytest

from shopdesk.domain.exceptions import (
    DuplicateEntityError,
    InvalidCustomer,
    InvalidProductInItems,
    InvalidQty,
    InvalidStatusTransition,
    OrderNotFound,
    OverlappingReservation,
    ProductInactive,
    StartNotBeforeEnd,
    ValidationError,
    http_status_for,
)


class TestErrorBodies:

    def test_status_transition(self):
        exc = InvalidStatusTransition("PAID", "CANCELLED")
        assert exc.to_dict() == {"error": "InvalidStatusTransition", "from": "PAID", "to": "CANCELLED"}

    def test_overlap_names_the_conflict(self):
        assert OverlappingReservation("R1").to_dict() == {
            "error": "OverlappingReservation",
            "reservationId": "R1",
        }

    def test_missing_products_listed(self):
        body = InvalidProductInItems(["P9", "P8"]).to_dict()
        assert body == {"error": "InvalidProductInItems", "productIds": ["P9", "P8"]}

    def test_line_errors_name_the_product(self):
        assert InvalidQty("P1").to_dict() == {"error": "InvalidQty", "productId": "P1"}

    def test_not_found_has_no_extra_fields(self):
        assert OrderNotFound("x").to_dict() == {"error": "OrderNotFound"}

    def test_validation_default_details(self):
        exc = ValidationError("bad")
        assert exc.details == [{"message": "bad"}]
        assert exc.to_dict()["error"] == "ValidationError"


class TestHttpStatus:

    @pytest.mark.parametrize(
        "exc, status",
        [
            (ValidationError("bad"), 400),
            (StartNotBeforeEnd(), 400),
            (ProductInactive("P1"), 400),
            (InvalidCustomer("nope"), 400),
            (OrderNotFound("x"), 404),
            (InvalidStatusTransition("PAID", "CANCELLED"), 409),
            (OverlappingReservation("R1"), 409),
            (DuplicateEntityError("SKU already exists"), 409),
        ],
    )
    def test_mapping(self, exc, status):
        assert http_status_for(exc) == status
