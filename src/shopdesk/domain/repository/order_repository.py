"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopdesk.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        """Return orders, newest first, optionally filtered."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order together with all of its items.

        Implementations must apply the header and the items as one unit:
        a reader sees the whole order or nothing.
        """

    @abstractmethod
    def update_status(self, order: Order, expected_from: OrderStatus) -> None:
        """Store the new status of ``order`` if the stored one is still ``expected_from``.

        The comparison and the write are one atomic step.  If another writer
        moved the order first, raise InvalidStatusTransition from the stored
        status, or OrderNotFound if the order is gone.
        """
