"""Application service: Change Order Status use case.

The status is the only field of a persisted order that ever changes, and
only along the transitions the Order aggregate allows (OPEN -> PAID,
OPEN -> CANCELLED).
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.dto import OrderDTO, to_order_dto
from shopdesk.application.schemas import OrderStatusPatch, parse_request
from shopdesk.domain.exceptions import InvalidStatusTransition, OrderNotFound
from shopdesk.domain.model.money import MoneySettings
from shopdesk.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, money: MoneySettings) -> None:
        self._order_repo = order_repo
        self._money = money

    def handle(
        self, order_id: str, payload: Mapping[str, Any] | OrderStatusPatch
    ) -> OrderDTO:
        patch = parse_request(OrderStatusPatch, payload)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        previous = order.status
        try:
            order.transition_to(patch.status)
            # re-checked against the stored status at write time
            self._order_repo.update_status(order, expected_from=previous)
        except InvalidStatusTransition as exc:
            logger.info(
                "Order status change rejected",
                order_id=order_id,
                from_status=exc.from_,
                to_status=exc.to,
            )
            raise

        logger.info("Order status changed", order_id=order_id, status=order.status.value)
        return to_order_dto(order, self._money.locale)
