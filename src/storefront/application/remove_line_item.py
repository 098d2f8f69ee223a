"""Application service: Remove Line Item use case."""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.application.lookups import require_order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RemoveLineItemHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, line_item_id: int) -> OrderDTO:
        order = require_order(self._order_repo, order_id)
        line_item = order.find_line_item(line_item_id)

        # raises IllegalStateError on completed orders
        order.remove_line_item(line_item)
        self._order_repo.save(order)
        logger.info("Order #%s: removed line item #%s", order.id, line_item_id)

        return to_order_dto(order)
