"""Unit tests for the line-item normalizer domain service."""

import pytest

from shopdesk.domain.exceptions import (
    InvalidProductInItems,
    InvalidQty,
    InvalidUnitCents,
    ProductInactive,
    ProductPriceMissing,
    ValidationError,
)
from shopdesk.domain.model.product import Product
from shopdesk.domain.service.line_item_normalizer import (
    LineItemNormalizer,
    RequestedLine,
)
from tests.fakes import FakeProductRepository


def _setup(*extra: Product) -> tuple[LineItemNormalizer, FakeProductRepository]:
    products = [
        Product(id="P1", sku="MUG", name="Mug", price_cents=500),
        Product(id="P2", sku="TEE", name="T-shirt", price_cents=1500),
        Product(id="OLD", sku="OLD", name="Retired", price_cents=900, active=False),
        *extra,
    ]
    repo = FakeProductRepository(products)
    return LineItemNormalizer(repo), repo


class TestPriceFreeze:

    def test_unit_cents_copied_from_catalog(self):
        normalizer, _ = _setup()
        items = normalizer.normalize([RequestedLine("P1", 2), RequestedLine("P2", 1)])
        assert [(i.product_id, i.qty, i.unit_cents) for i in items] == [
            ("P1", 2, 500),
            ("P2", 1, 1500),
        ]

    def test_product_details_resolved(self):
        normalizer, _ = _setup()
        (item,) = normalizer.normalize([RequestedLine("P2", 1)])
        assert item.product_name == "T-shirt"
        assert item.sku == "TEE"

    def test_single_batch_lookup(self):
        normalizer, repo = _setup()
        normalizer.normalize([RequestedLine("P1", 1), RequestedLine("P2", 1), RequestedLine("P1", 1)])
        assert repo.batch_lookups == 1


class TestMerge:

    def test_duplicates_merged_into_one_line(self):
        normalizer, _ = _setup()
        items = normalizer.normalize([RequestedLine("P1", 2), RequestedLine("P1", 3)])
        assert len(items) == 1
        assert items[0].qty == 5
        assert items[0].unit_cents == 500

    def test_first_appearance_order_kept(self):
        normalizer, _ = _setup()
        items = normalizer.normalize(
            [RequestedLine("P2", 1), RequestedLine("P1", 1), RequestedLine("P2", 4)]
        )
        assert [(i.product_id, i.qty) for i in items] == [("P2", 5), ("P1", 1)]


class TestRejections:

    def test_unknown_product(self):
        normalizer, _ = _setup()
        with pytest.raises(InvalidProductInItems) as info:
            normalizer.normalize([RequestedLine("P1", 1), RequestedLine("NOPE", 1)])
        assert info.value.missing == ["NOPE"]

    def test_inactive_product(self):
        normalizer, _ = _setup()
        with pytest.raises(ProductInactive) as info:
            normalizer.normalize([RequestedLine("P1", 1), RequestedLine("OLD", 1)])
        assert info.value.product_id == "OLD"
        assert info.value.to_dict() == {"error": "ProductInactive", "productId": "OLD"}

    def test_unknown_checked_before_inactive(self):
        normalizer, _ = _setup()
        with pytest.raises(InvalidProductInItems):
            normalizer.normalize([RequestedLine("OLD", 1), RequestedLine("NOPE", 1)])

    def test_missing_price(self):
        normalizer, _ = _setup(Product(id="NP", sku="NP", name="No price", price_cents=None))
        with pytest.raises(ProductPriceMissing) as info:
            normalizer.normalize([RequestedLine("NP", 1)])
        assert info.value.product_id == "NP"

    def test_negative_price(self):
        normalizer, _ = _setup(Product(id="NEG", sku="NEG", name="Broken", price_cents=-1))
        with pytest.raises(InvalidUnitCents):
            normalizer.normalize([RequestedLine("NEG", 1)])

    def test_fractional_price(self):
        normalizer, _ = _setup(Product(id="FR", sku="FR", name="Broken", price_cents=9.5))
        with pytest.raises(InvalidUnitCents):
            normalizer.normalize([RequestedLine("FR", 1)])

    @pytest.mark.parametrize("qty", [0, -2, 1.5, True])
    def test_bad_quantity(self, qty):
        normalizer, _ = _setup()
        with pytest.raises(InvalidQty) as info:
            normalizer.normalize([RequestedLine("P1", 1), RequestedLine("P2", qty)])
        assert info.value.product_id == "P2"

    def test_empty_request(self):
        normalizer, _ = _setup()
        with pytest.raises(ValidationError):
            normalizer.normalize([])
