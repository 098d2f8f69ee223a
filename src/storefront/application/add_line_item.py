"""Application service: Add Line Item use case.

Orchestrates the flow for putting a purchasable on an order:
1. Look up the order and the purchasable (in the order's store).
2. Refuse purchasables that are not available at all.
3. Merge into the existing line item for that purchasable, if any.
4. Populate, re-price and validate via the synchronizer.
5. Persist only when no rule was violated.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderChangeDTO, to_notice_dto, to_order_dto
from storefront.application.lookups import require_order
from storefront.domain.exceptions import (
    EntityNotFoundError,
    IllegalStateError,
    InvalidValueError,
    OrderValidationError,
    PurchasableUnavailableError,
)
from storefront.domain.model.order import LineItem
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer
from storefront.domain.service.stock_gate import StockGate

logger = logging.getLogger(__name__)


class AddLineItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        purchasable_repo: PurchasableRepository,
        synchronizer: LineItemSynchronizer,
        stock_gate: StockGate,
    ) -> None:
        self._order_repo = order_repo
        self._purchasable_repo = purchasable_repo
        self._synchronizer = synchronizer
        self._stock_gate = stock_gate

    def handle(self, order_id: int, sku: str, qty: int) -> OrderChangeDTO:
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
            raise InvalidValueError("Quantity must be a whole number of at least 1")

        order = require_order(self._order_repo, order_id)
        if order.is_completed:
            raise IllegalStateError(f"Order #{order_id} is already completed")

        purchasable = self._purchasable_repo.get_by_sku(sku, order.store_id)
        if purchasable is None:
            raise EntityNotFoundError(f"Purchasable not found: '{sku}'")
        if not self._stock_gate.is_available(purchasable):
            raise PurchasableUnavailableError(
                f"'{purchasable}' is not available for purchase"
            )

        line_item = order.find_line_item_for(purchasable.id)  # type: ignore[arg-type]
        if line_item is None:
            line_item = LineItem(id=None, purchasable_id=purchasable.id, qty=qty)
            order.add_line_item(line_item)
        else:
            line_item.qty += qty

        result = self._synchronizer.populate_and_validate(line_item, purchasable)
        if not result.ok:
            raise OrderValidationError(
                f"Could not add '{purchasable}' to order #{order_id}",
                result.errors,
                result.notices,
            )

        self._order_repo.save(order)
        logger.info("Order #%s: %s x %d", order.id, purchasable.sku, line_item.qty)

        return OrderChangeDTO(
            order=to_order_dto(order),
            notices=[to_notice_dto(n) for n in result.notices],
        )
