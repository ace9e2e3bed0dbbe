"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from shopdesk.domain.model.money import NBSP
from shopdesk.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SHOPDESK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TAX_RATE", "0.21")
    monkeypatch.setenv("CURRENCY", "EUR")
    monkeypatch.setenv("MONEY_LOCALE", "es-ES")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args))

    return invoke


def _created_id(result):
    """'Customer <id> ...' / 'Product <id> ...' -> <id>"""
    assert result.exit_code == 0, result.output
    return result.output.split()[1]


@pytest.fixture
def catalog(run):
    customer_id = _created_id(run("customer", "add", "--email", "ada@example.com", "--name", "Ada"))
    mug = _created_id(run("product", "add", "--sku", "MUG", "--name", "Mug", "--price-cents", "500"))
    tee = _created_id(run("product", "add", "--sku", "TEE", "--name", "Tee", "--price-cents", "1500"))
    return customer_id, mug, tee


class TestOrderCommands:

    def test_create_pay_then_cancel_rejected(self, run, catalog):
        customer_id, mug, tee = catalog

        result = run("order", "create", "--customer", customer_id,
                     "--items", f"{mug}:2,{tee}", "--json")
        assert result.exit_code == 0, result.output
        order = json.loads(result.output)
        assert order["status"] == "OPEN"
        assert (order["subtotalCents"], order["taxCents"], order["totalCents"]) == (2500, 525, 3025)
        assert order["totalFormatted"] == f"30,25{NBSP}€"
        assert [i["qty"] for i in order["items"]] == [2, 1]

        paid = run("order", "pay", "--id", order["id"])
        assert paid.exit_code == 0, paid.output
        assert "is now PAID" in paid.output

        cancelled = run("order", "cancel", "--id", order["id"])
        assert cancelled.exit_code == 1
        assert "InvalidStatusTransition" in cancelled.output

    def test_price_change_does_not_touch_existing_order(self, run, catalog):
        customer_id, mug, _ = catalog
        order = json.loads(
            run("order", "create", "--customer", customer_id, "--items", mug, "--json").output
        )

        assert run("product", "update", "--id", mug, "--price-cents", "900").exit_code == 0

        shown = json.loads(run("order", "show", "--id", order["id"], "--json").output)
        assert shown["items"][0]["unitCents"] == 500
        assert shown["totalCents"] == 605

    def test_show_table(self, run, catalog):
        customer_id, mug, _ = catalog
        order = json.loads(
            run("order", "create", "--customer", customer_id, "--items", mug, "--json").output
        )
        result = run("order", "show", "--id", order["id"])
        assert result.exit_code == 0, result.output
        assert "Tax (21%)" in result.output
        assert f"6,05{NBSP}€" in result.output

    def test_unknown_customer(self, run, catalog):
        _, mug, _ = catalog
        result = run("order", "create", "--customer", "ghost", "--items", mug)
        assert result.exit_code == 1
        assert "InvalidCustomerOrProduct" in result.output

    def test_inactive_product(self, run, catalog):
        customer_id, mug, _ = catalog
        run("product", "update", "--id", mug, "--inactive")
        result = run("order", "create", "--customer", customer_id, "--items", mug)
        assert result.exit_code == 1
        assert "ProductInactive" in result.output

    def test_bad_quantity_text(self, run, catalog):
        customer_id, mug, _ = catalog
        result = run("order", "create", "--customer", customer_id, "--items", f"{mug}:two")
        assert result.exit_code == 2

    def test_unknown_order(self, run):
        result = run("order", "pay", "--id", "missing")
        assert result.exit_code == 1
        assert "OrderNotFound" in result.output

    def test_list_by_status(self, run, catalog):
        customer_id, mug, tee = catalog
        first = json.loads(run("order", "create", "--customer", customer_id, "--items", mug, "--json").output)
        run("order", "create", "--customer", customer_id, "--items", tee)
        run("order", "cancel", "--id", first["id"])

        listed = json.loads(run("order", "list", "--status", "cancelled", "--json").output)
        assert [o["id"] for o in listed] == [first["id"]]


class TestReservationCommands:

    def test_overlap_rejected_back_to_back_accepted(self, run, catalog):
        customer_id = catalog[0]

        first = run("reservation", "create", "--customer", customer_id,
                    "--start", "2026-05-01T10:00:00Z", "--end", "2026-05-01T11:00:00Z",
                    "--status", "confirmed")
        assert first.exit_code == 0, first.output
        assert "CONFIRMED" in first.output

        clash = run("reservation", "create", "--customer", customer_id,
                    "--start", "2026-05-01T10:30:00Z", "--end", "2026-05-01T11:30:00Z")
        assert clash.exit_code == 1
        assert "OverlappingReservation" in clash.output

        after = run("reservation", "create", "--customer", customer_id,
                    "--start", "2026-05-01T11:00:00Z", "--end", "2026-05-01T12:00:00Z", "--json")
        assert after.exit_code == 0, after.output
        booked = json.loads(after.output)
        assert booked["partySize"] == 1
        assert booked["status"] == "PENDING"

        listed = run("reservation", "list", "--customer", customer_id)
        assert listed.output.count("2026-05-01T") == 4

    def test_bad_interval(self, run, catalog):
        result = run("reservation", "create", "--customer", catalog[0],
                     "--start", "2026-05-01T11:00:00Z", "--end", "2026-05-01T10:00:00Z")
        assert result.exit_code == 1
        assert "startAt_must_be_before_endAt" in result.output


class TestCatalogCommands:

    def test_duplicate_sku(self, run, catalog):
        result = run("product", "add", "--sku", "MUG", "--name", "Mug", "--price-cents", "1")
        assert result.exit_code == 1
        assert "Conflict" in result.output

    def test_update_needs_a_change(self, run, catalog):
        result = run("product", "update", "--id", catalog[1])
        assert result.exit_code == 2

    def test_list_json(self, run, catalog):
        customers = json.loads(run("customer", "list", "--json").output)
        products = json.loads(run("product", "list", "--json").output)
        assert [c["email"] for c in customers] == ["ada@example.com"]
        assert {p["sku"]: p["priceCents"] for p in products} == {"MUG": 500, "TEE": 1500}

    def test_seed_is_idempotent(self, run):
        assert "Seeded 5 customers and 6 products." in run("seed").output
        assert "Seeded 0 customers and 0 products." in run("seed").output

    def test_damaged_store_reports_internal_error(self, run, catalog, tmp_path):
        (tmp_path / "data" / "customers.json").write_text('[{"id": "C9"}]', encoding="utf-8")
        result = run("customer", "list")
        assert result.exit_code == 1
        assert "InternalError" in result.output
