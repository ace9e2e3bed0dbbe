"""CLI commands for the Reservation aggregate."""

from __future__ import annotations

import json

import click

from shopdesk.application.create_reservation import CreateReservationHandler
from shopdesk.application.list_reservations import ListReservationsHandler
from shopdesk.infrastructure.bootstrap import (
    customer_repository,
    reservation_repository,
)
from shopdesk.infrastructure.cli.errors import reported_errors


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--start", "start_at", required=True, help="Start, ISO-8601 (e.g. 2026-05-01T10:00:00Z).")
@click.option("--end", "end_at", required=True, help="End, ISO-8601; exclusive.")
@click.option("--party-size", type=int, default=None, help="Number of guests (default 1).")
@click.option(
    "--status",
    type=click.Choice(["PENDING", "CONFIRMED", "CANCELLED"], case_sensitive=False),
    default=None,
    help="Initial status (default PENDING).",
)
@click.option("--notes", default=None, help="Free-form notes.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the reservation as JSON.")
def reservation_create(
    customer_id: str,
    start_at: str,
    end_at: str,
    party_size: int | None,
    status: str | None,
    notes: str | None,
    as_json: bool,
) -> None:
    """Book a time slot; rejected if it overlaps the customer's active bookings."""
    payload = {"customer_id": customer_id, "start_at": start_at, "end_at": end_at}
    if party_size is not None:
        payload["party_size"] = party_size
    if status is not None:
        payload["status"] = status.upper()
    if notes is not None:
        payload["notes"] = notes

    handler = CreateReservationHandler(
        reservation_repo=reservation_repository(),
        customer_repo=customer_repository(),
    )

    with reported_errors():
        dto = handler.handle(payload)

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2, ensure_ascii=False))
        return
    click.echo(
        f"Reservation {dto.id} {dto.status}: {dto.start_at} -> {dto.end_at} "
        f"(party of {dto.party_size})"
    )


@click.command("list")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
def reservation_list(customer_id: str) -> None:
    """List a customer's reservations, latest first."""
    handler = ListReservationsHandler(reservation_repo=reservation_repository())

    with reported_errors():
        dtos = handler.handle(customer_id)

    if not dtos:
        click.echo("No reservations found.")
        return

    click.echo(f"{'ID':<34} {'Start':<27} {'End':<27} {'Party':>5} {'Status':<10}")
    click.echo("-" * 107)
    for d in dtos:
        click.echo(f"{d.id:<34} {d.start_at:<27} {d.end_at:<27} {d.party_size:>5} {d.status:<10}")
