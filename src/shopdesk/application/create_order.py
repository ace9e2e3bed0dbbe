"""Application service: Create Order use case (the transactional order creator).

Orchestrates the flow between repositories and the domain model:
validation gate -> line-item normalizer -> money engine -> one atomic
write of the order header and all of its items.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from shopdesk.application.dto import OrderDTO, to_order_dto
from shopdesk.application.schemas import OrderCreateRequest, parse_request
from shopdesk.domain.exceptions import InvalidCustomerOrProduct
from shopdesk.domain.model.money import MoneySettings
from shopdesk.domain.model.order import Order
from shopdesk.domain.repository.customer_repository import CustomerRepository
from shopdesk.domain.repository.order_repository import OrderRepository
from shopdesk.domain.repository.product_repository import ProductRepository
from shopdesk.domain.service.line_item_normalizer import (
    LineItemNormalizer,
    RequestedLine,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        money: MoneySettings,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._money = money

    def handle(self, payload: Mapping[str, Any] | OrderCreateRequest) -> OrderDTO:
        """Create a new purchase order.

        Steps:
        1. Validate the payload (defaults applied here).
        2. Resolve, price-freeze and merge the lines.
        3. Let the Order factory compute totals with the configured tax rate.
        4. Persist header and items in one write and return a DTO.

        Nothing is written unless every step before 4 succeeded.
        """
        request = parse_request(OrderCreateRequest, payload)

        normalizer = LineItemNormalizer(self._product_repo)
        items = normalizer.normalize(
            [RequestedLine(product_id=i.product_id, qty=i.qty) for i in request.items]
        )

        if self._customer_repo.get_by_id(request.customer_id) is None:
            raise InvalidCustomerOrProduct(
                f"Customer '{request.customer_id}' does not exist"
            )

        order = Order.create(
            customer_id=request.customer_id,
            items=items,
            tax_rate=self._money.tax_rate,
            currency_code=self._money.currency_code,
        )
        self._order_repo.add(order)

        logger.info(
            "Order created",
            order_id=order.id,
            customer_id=order.customer_id,
            lines=len(order.items),
            total_cents=order.total_cents,
            currency=order.currency_code,
        )
        return to_order_dto(order, self._money.locale)
