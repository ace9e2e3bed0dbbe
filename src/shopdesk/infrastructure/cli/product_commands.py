"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from shopdesk.application.add_product import AddProductHandler
from shopdesk.application.dto import product_to_dict
from shopdesk.application.list_products import ListProductsHandler
from shopdesk.application.update_product import UpdateProductHandler
from shopdesk.domain.model.money import format_money
from shopdesk.infrastructure.bootstrap import product_repository, settings
from shopdesk.infrastructure.cli.errors import reported_errors


def _price(cents: int | None) -> str:
    if cents is None:
        return "-"
    money = settings().money
    return format_money(cents, money.currency_code, money.locale)


@click.command("add")
@click.option("--sku", required=True, help="Unique stock-keeping unit.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price-cents", required=True, type=int, help="Price in minor units (e.g. 1500).")
@click.option("--description", default=None, help="Optional description.")
@click.option("--inactive", is_flag=True, default=False, help="Add as not orderable.")
def product_add(
    sku: str, name: str, price_cents: int, description: str | None, inactive: bool
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    payload = {"sku": sku, "name": name, "price_cents": price_cents, "active": not inactive}
    if description is not None:
        payload["description"] = description

    with reported_errors():
        product = handler.handle(payload)

    click.echo(f"Product {product.id} '{product.name}' added at {_price(product.price_cents)}")


@click.command("list")
@click.option("--active-only", is_flag=True, default=False, help="Hide inactive products.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print products as JSON.")
def product_list(active_only: bool, as_json: bool) -> None:
    """List the catalog by SKU."""
    handler = ListProductsHandler(product_repo=product_repository())

    with reported_errors():
        products = handler.handle(active_only=active_only)

    if as_json:
        click.echo(json.dumps([product_to_dict(p) for p in products], indent=2))
        return
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'SKU':<10} {'Name':<20} {'Price':>12} {'Active':>7}")
    click.echo("-" * 87)
    for p in products:
        active = "yes" if p.active else "no"
        click.echo(f"{p.id:<34} {p.sku:<10} {p.name:<20} {_price(p.price_cents):>12} {active:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price-cents", type=int, default=None, help="New price in minor units.")
@click.option("--active/--inactive", default=None, help="Switch availability.")
def product_update(product_id: str, price_cents: int | None, active: bool | None) -> None:
    """Update a product's price or availability."""
    if price_cents is None and active is None:
        raise click.UsageError("Nothing to update: pass --price-cents and/or --active/--inactive")

    handler = UpdateProductHandler(product_repo=product_repository())

    payload = {}
    if price_cents is not None:
        payload["price_cents"] = price_cents
    if active is not None:
        payload["active"] = active

    with reported_errors():
        product = handler.handle(product_id, payload)

    state = "active" if product.active else "inactive"
    click.echo(f"Product {product.id} now {_price(product.price_cents)} ({state})")
