"""Application service: Add Customer use case."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.schemas import CustomerCreateRequest, parse_request
from shopdesk.domain.exceptions import DuplicateEntityError
from shopdesk.domain.model.customer import Customer
from shopdesk.domain.model.value_objects import new_id
from shopdesk.domain.repository.customer_repository import CustomerRepository

logger = structlog.get_logger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, payload: Mapping[str, Any] | CustomerCreateRequest) -> Customer:
        """Register a customer; the email must not be taken."""
        request = parse_request(CustomerCreateRequest, payload)

        if self._customer_repo.get_by_email(request.email) is not None:
            raise DuplicateEntityError("Email already exists")

        customer = Customer(
            id=new_id(),
            email=request.email.lower(),
            name=request.name,
            phone=request.phone,
            notes=request.notes,
        )
        self._customer_repo.save(customer)
        logger.info("Customer added", customer_id=customer.id)
        return customer
