"""Application service: List Orders use case (query)."""

from __future__ import annotations

from shopdesk.application.dto import OrderDTO, to_order_dto
from shopdesk.domain.exceptions import ValidationError
from shopdesk.domain.model.money import MoneySettings
from shopdesk.domain.model.order import OrderStatus
from shopdesk.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, money: MoneySettings) -> None:
        self._order_repo = order_repo
        self._money = money

    def handle(
        self, customer_id: str | None = None, status: str | None = None
    ) -> list[OrderDTO]:
        wanted: OrderStatus | None = None
        if status:
            try:
                wanted = OrderStatus(status.upper())
            except ValueError as exc:
                raise ValidationError(f"Unknown order status: {status!r}") from exc

        orders = self._order_repo.list(customer_id=customer_id, status=wanted)
        return [to_order_dto(order, self._money.locale) for order in orders]
