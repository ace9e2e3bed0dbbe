"""Demo data for a fresh data directory."""

from __future__ import annotations

from shopdesk.application.add_customer import AddCustomerHandler
from shopdesk.application.add_product import AddProductHandler
from shopdesk.domain.repository.customer_repository import CustomerRepository
from shopdesk.domain.repository.product_repository import ProductRepository

DEMO_CUSTOMERS = [
    {"email": "ada@example.com", "name": "Ada Lovelace", "phone": "+34600123456"},
    {"email": "alan@example.com", "name": "Alan Turing", "phone": "+34600222333"},
    {"email": "grace@example.com", "name": "Grace Hopper", "phone": "+34600333444"},
    {"email": "linus@example.com", "name": "Linus Torvalds", "phone": "+34600444555"},
    {"email": "margaret@example.com", "name": "Margaret Hamilton", "phone": "+34600555666"},
]

DEMO_PRODUCTS = [
    {"sku": "COF-ESP", "name": "Espresso", "price_cents": 150},
    {"sku": "COF-LAT", "name": "Caffe Latte", "price_cents": 280},
    {"sku": "TEA-GRN", "name": "Green Tea", "price_cents": 220},
    {"sku": "PST-CRO", "name": "Croissant", "price_cents": 190},
    {"sku": "PST-CHE", "name": "Cheesecake", "price_cents": 450},
    {"sku": "MER-MUG", "name": "Logo Mug", "price_cents": 1200, "active": False},
]


def seed(
    customer_repo: CustomerRepository, product_repo: ProductRepository
) -> tuple[int, int]:
    """Insert demo rows that are not there yet; return (customers, products) added."""
    add_customer = AddCustomerHandler(customer_repo)
    add_product = AddProductHandler(product_repo)

    customers = 0
    for payload in DEMO_CUSTOMERS:
        if customer_repo.get_by_email(payload["email"]) is None:
            add_customer.handle(payload)
            customers += 1

    products = 0
    for payload in DEMO_PRODUCTS:
        if product_repo.get_by_sku(payload["sku"]) is None:
            add_product.handle(payload)
            products += 1

    return customers, products
