import click

from shopdesk.infrastructure import bootstrap
from shopdesk.infrastructure.cli.customer_commands import customer_add, customer_list
from shopdesk.infrastructure.cli.errors import reported_errors
from shopdesk.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_pay,
    order_show,
)
from shopdesk.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from shopdesk.infrastructure.cli.reservation_commands import (
    reservation_create,
    reservation_list,
)
from shopdesk.infrastructure.config import Settings, load_environment
from shopdesk.infrastructure.seed import seed as seed_demo_data


@click.group()
def cli() -> None:
    """shopdesk — orders, catalog and reservations"""
    load_environment()
    bootstrap.init(Settings.from_env())


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def reservation() -> None:
    """Manage reservations."""


@cli.command()
def seed() -> None:
    """Load demo customers and products."""
    with reported_errors():
        customers, products = seed_demo_data(
            bootstrap.customer_repository(), bootstrap.product_repository()
        )
    click.echo(f"Seeded {customers} customers and {products} products.")


# Register subcommands
customer.add_command(customer_add)
customer.add_command(customer_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_cancel)
reservation.add_command(reservation_create)
reservation.add_command(reservation_list)
