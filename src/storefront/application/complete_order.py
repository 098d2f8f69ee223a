"""Application service: Complete Order use case.

Completion is the point where stock and limits stop being constraints
and become history.  Before that happens every line item is checked
one last time; any violation blocks completion and all of them are
reported together.

Stock is deducted here, after validation, for each purchasable on the
order.  Serializing concurrent completions is the caller's job.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.application.lookups import require_order
from storefront.application.refresh_order import synchronize_order
from storefront.domain.exceptions import IllegalStateError, OrderValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        purchasable_repo: PurchasableRepository,
        synchronizer: LineItemSynchronizer,
    ) -> None:
        self._order_repo = order_repo
        self._purchasable_repo = purchasable_repo
        self._synchronizer = synchronizer

    def handle(self, order_id: int) -> OrderDTO:
        order = require_order(self._order_repo, order_id)
        if order.is_completed:
            raise IllegalStateError(f"Order #{order_id} is already completed")
        if not order.items:
            raise IllegalStateError(f"Cannot complete order #{order_id} without line items")

        outcome = synchronize_order(order, self._purchasable_repo, self._synchronizer)
        if outcome.errors:
            # keep the quiet corrections even though completion is refused
            self._order_repo.save(order)
            raise OrderValidationError(
                f"Order #{order_id} cannot be completed",
                outcome.errors,
                outcome.notices,
            )

        # deduct stock, then freeze the order
        for line_item in order.items:
            purchasable = self._purchasable_repo.get_by_id(
                line_item.purchasable_id, order.store_id  # type: ignore[arg-type]
            )
            if purchasable is None or purchasable.has_unlimited_stock:
                continue
            purchasable.deduct_stock(line_item.qty)
            self._purchasable_repo.save(purchasable)

        order.complete()
        self._order_repo.save(order)
        logger.info("Completed order #%s, total %s", order.id, order.total)

        return to_order_dto(order)
