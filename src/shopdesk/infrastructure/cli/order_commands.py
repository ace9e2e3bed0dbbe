"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from shopdesk.application.change_order_status import ChangeOrderStatusHandler
from shopdesk.application.create_order import CreateOrderHandler
from shopdesk.application.dto import OrderDTO
from shopdesk.application.list_orders import ListOrdersHandler
from shopdesk.application.show_order import ShowOrderHandler
from shopdesk.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
    settings,
)
from shopdesk.infrastructure.cli.errors import reported_errors


def _parse_items(raw: str) -> list[dict]:
    """Parse 'P1:3,P2:5,P3' into item payloads; a bare id means the default qty."""
    items: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            items.append({"product_id": pair})
            continue
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append({"product_id": product_id.strip(), "qty": qty})
    if not items:
        raise click.BadParameter("At least one item is required.")
    return items


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.qty:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Subtotal':<26} {dto.subtotal_formatted:>26}")
    tax_label = f"Tax ({(dto.tax_rate * 100).normalize():f}%)"
    click.echo(f"  {tax_label:<26} {dto.tax_formatted:>26}")
    click.echo(f"  {'Order Total':<26} {dto.total_formatted:>26}")


def _emit(dto: OrderDTO, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2, ensure_ascii=False))
    else:
        _display_order(dto)


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the order as JSON.")
def order_create(customer_id: str, items: str, as_json: bool) -> None:
    """Create a new purchase order at current catalog prices."""
    payload = {"customer_id": customer_id, "items": _parse_items(items)}

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
        money=settings().money,
    )

    with reported_errors():
        dto = handler.handle(payload)

    _emit(dto, as_json)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the order as JSON.")
def order_show(order_id: str, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(), money=settings().money)

    with reported_errors():
        dto = handler.handle(order_id)

    _emit(dto, as_json)


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.option("--status", default=None, help="OPEN, PAID or CANCELLED.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print orders as JSON.")
def order_list(customer_id: str | None, status: str | None, as_json: bool) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(), money=settings().money)

    with reported_errors():
        dtos = handler.handle(customer_id=customer_id, status=status)

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in dtos], indent=2, ensure_ascii=False))
        return
    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'Status':<10} {'Items':>5} {'Total':>14}")
    click.echo("-" * 66)
    for d in dtos:
        click.echo(f"{d.id:<34} {d.status:<10} {len(d.items):>5} {d.total_formatted:>14}")


def _change_status(order_id: str, status: str) -> OrderDTO:
    handler = ChangeOrderStatusHandler(order_repo=order_repository(), money=settings().money)
    with reported_errors():
        return handler.handle(order_id, {"status": status})


@click.command("pay")
@click.option("--id", "order_id", required=True, help="Order ID to mark as paid.")
def order_pay(order_id: str) -> None:
    """Mark an open order as PAID."""
    dto = _change_status(order_id, "PAID")
    click.echo(f"Order {dto.id} is now {dto.status} ({dto.total_formatted}).")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
def order_cancel(order_id: str) -> None:
    """Cancel an open order."""
    dto = _change_status(order_id, "CANCELLED")
    click.echo(f"Order {dto.id} is now {dto.status}.")
