"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import json

import click

from shopdesk.application.add_customer import AddCustomerHandler
from shopdesk.application.dto import customer_to_dict
from shopdesk.application.list_customers import ListCustomersHandler
from shopdesk.infrastructure.bootstrap import customer_repository
from shopdesk.infrastructure.cli.errors import reported_errors


@click.command("add")
@click.option("--email", required=True, help="Unique email address.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--notes", default=None, help="Free-form notes.")
def customer_add(email: str, name: str, phone: str | None, notes: str | None) -> None:
    """Register a new customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository())

    payload = {"email": email, "name": name}
    if phone is not None:
        payload["phone"] = phone
    if notes is not None:
        payload["notes"] = notes

    with reported_errors():
        created = handler.handle(payload)

    click.echo(f"Customer {created.id} '{created.name}' <{created.email}> added")


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print customers as JSON.")
def customer_list(as_json: bool) -> None:
    """List all customers."""
    with reported_errors():
        customers = ListCustomersHandler(customer_repo=customer_repository()).handle()

    if as_json:
        click.echo(json.dumps([customer_to_dict(c) for c in customers], indent=2))
        return
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<34} {'Name':<22} {'Email':<30}")
    click.echo("-" * 88)
    for c in customers:
        click.echo(f"{c.id:<34} {c.name:<22} {c.email:<30}")
