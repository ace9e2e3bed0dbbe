"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime

from shopdesk.domain.model.customer import Customer
from shopdesk.domain.repository.customer_repository import CustomerRepository
from shopdesk.infrastructure.persistence.json_file_store import JsonFileStore


class JsonCustomerRepository(JsonFileStore, CustomerRepository):

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._load_raw():
            if raw["id"] == customer_id:
                return self._decode(raw)
        return None

    def get_by_email(self, email: str) -> Customer | None:
        for customer in self.list_all():
            if customer.email.lower() == email.lower():
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return [self._decode(raw) for raw in self._load_raw()]

    def save(self, customer: Customer) -> None:
        with self._transaction() as records:
            self._upsert(records, self._to_raw(customer))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "email": customer.email,
            "name": customer.name,
            "phone": customer.phone,
            "notes": customer.notes,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            email=raw["email"],
            name=raw["name"],
            phone=raw.get("phone"),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
