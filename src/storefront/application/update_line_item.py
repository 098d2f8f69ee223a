"""Application service: Update Line Item use case.

Setting the quantity to zero removes the line item.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderChangeDTO, to_notice_dto, to_order_dto
from storefront.application.lookups import require_order
from storefront.domain.exceptions import IllegalStateError, OrderValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer

logger = logging.getLogger(__name__)


class UpdateLineItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        purchasable_repo: PurchasableRepository,
        synchronizer: LineItemSynchronizer,
    ) -> None:
        self._order_repo = order_repo
        self._purchasable_repo = purchasable_repo
        self._synchronizer = synchronizer

    def handle(self, order_id: int, line_item_id: int, qty: int) -> OrderChangeDTO:
        order = require_order(self._order_repo, order_id)
        if order.is_completed:
            raise IllegalStateError(f"Order #{order_id} is already completed")

        line_item = order.find_line_item(line_item_id)

        if qty == 0:
            order.remove_line_item(line_item)
            self._order_repo.save(order)
            logger.info("Order #%s: removed line item #%s", order.id, line_item_id)
            return OrderChangeDTO(order=to_order_dto(order))

        line_item.qty = qty
        purchasable = None
        if line_item.purchasable_id is not None:
            purchasable = self._purchasable_repo.get_by_id(
                line_item.purchasable_id, order.store_id
            )

        result = self._synchronizer.populate_and_validate(line_item, purchasable)
        if not result.ok:
            raise OrderValidationError(
                f"Could not update line item #{line_item_id}",
                result.errors,
                result.notices,
            )

        self._order_repo.save(order)
        logger.info("Order #%s: line item #%s now x %s", order.id, line_item_id, line_item.qty)

        return OrderChangeDTO(
            order=to_order_dto(order),
            notices=[to_notice_dto(n) for n in result.notices],
        )
