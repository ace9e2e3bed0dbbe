"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shopdesk.application.dto import OrderDTO, to_order_dto
from shopdesk.domain.exceptions import OrderNotFound
from shopdesk.domain.model.money import MoneySettings
from shopdesk.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, money: MoneySettings) -> None:
        self._order_repo = order_repo
        self._money = money

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return to_order_dto(order, self._money.locale)
