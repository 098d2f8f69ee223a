"""Application service: Refresh Order use case.

Re-runs price resolution, stock correction and quantity validation for
every line item of an open order.  Corrections are saved; rule
violations are reported but do not stop the save, since they only
block completion.

A line item whose purchasable has been deleted is either dropped (with
a notice) or left in place so the caller can report the order as
inconsistent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.application.dto import OrderChangeDTO, to_notice_dto, to_order_dto
from storefront.application.lookups import require_order
from storefront.domain.model.notice import Notice, NoticeType
from storefront.domain.model.order import Order
from storefront.domain.model.validation import ValidationError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer

logger = logging.getLogger(__name__)


@dataclass
class OrderSyncOutcome:
    notices: list[Notice] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)


def synchronize_order(
    order: Order,
    purchasable_repo: PurchasableRepository,
    synchronizer: LineItemSynchronizer,
    drop_missing: bool = False,
) -> OrderSyncOutcome:
    """Synchronize every line item of *order* in place."""
    outcome = OrderSyncOutcome()
    if order.is_completed:
        return outcome

    for line_item in list(order.items):
        purchasable = None
        if line_item.purchasable_id is not None:
            purchasable = purchasable_repo.get_by_id(line_item.purchasable_id, order.store_id)

        if purchasable is None and drop_missing:
            notice = Notice(
                type=NoticeType.LINE_ITEM_REMOVED,
                attribute=line_item.field_path("purchasableId"),
                message=f"{line_item.description or 'An item'} is no longer available "
                f"and was removed from your order.",
            )
            order.remove_line_item(line_item)
            order.add_notice(notice)
            outcome.notices.append(notice)
            logger.info(
                "Order #%s: dropped line item #%s, purchasable #%s is gone",
                order.id, line_item.id, line_item.purchasable_id,
            )
            continue

        result = synchronizer.populate_and_validate(line_item, purchasable)
        outcome.notices.extend(result.notices)
        outcome.errors.extend(result.errors)

    return outcome


class RefreshOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        purchasable_repo: PurchasableRepository,
        synchronizer: LineItemSynchronizer,
    ) -> None:
        self._order_repo = order_repo
        self._purchasable_repo = purchasable_repo
        self._synchronizer = synchronizer

    def handle(self, order_id: int, drop_missing: bool = True) -> OrderChangeDTO:
        order = require_order(self._order_repo, order_id)
        if order.is_completed:
            return OrderChangeDTO(order=to_order_dto(order))

        outcome = synchronize_order(
            order, self._purchasable_repo, self._synchronizer, drop_missing=drop_missing
        )
        self._order_repo.save(order)

        return OrderChangeDTO(
            order=to_order_dto(order),
            notices=[to_notice_dto(n) for n in outcome.notices],
            errors=[e.message for e in outcome.errors],
        )
