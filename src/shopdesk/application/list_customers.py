"""Application service: List Customers use case (query)."""

from __future__ import annotations

from shopdesk.domain.model.customer import Customer
from shopdesk.domain.repository.customer_repository import CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[Customer]:
        """All customers, oldest registration first."""
        return sorted(self._customer_repo.list_all(), key=lambda c: c.created_at)
