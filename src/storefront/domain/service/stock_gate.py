"""Domain service: Stock Gate.

Decides whether a purchasable can be bought at all, and whether the
quantity an order asks for respects stock and per-order limits.

The gate only *reads* stock.  Decrementing it on completion, and
serializing concurrent writers, is the job of the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from storefront.domain.model.order import LineItem, Order
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.model.sku import is_temp_sku
from storefront.domain.model.validation import ValidationError
from storefront.domain.service.line_item_rules import DEFAULT_RULES, Rule, RuleContext

logger = logging.getLogger(__name__)


class StockGate:

    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    # --- Availability ---------------------------------------------------------

    def is_available(self, purchasable: Purchasable) -> bool:
        """True when the purchasable may be added to an order."""
        if not purchasable.available_for_purchase:
            return False
        if not purchasable.is_enabled:
            return False
        if not purchasable.has_unlimited_stock and (purchasable.stock or 0) < 1:
            return False
        if is_temp_sku(purchasable.sku):
            return False
        return True

    # --- Quantity validation --------------------------------------------------

    def validate_quantity(
        self,
        purchasable: Purchasable | None,
        requested_qty: object,
        aggregate_qty: int,
        order: Order | None = None,
    ) -> list[ValidationError]:
        """Run every rule and collect their errors.

        Returns an empty list for completed orders: after completion,
        stock and limits are no longer constraints.
        """
        if order is not None and order.is_completed:
            return []

        ctx = RuleContext(
            purchasable=purchasable,
            requested_qty=requested_qty,
            aggregate_qty=aggregate_qty,
        )
        errors: list[ValidationError] = []
        for rule in self._rules:
            errors.extend(rule(ctx))

        if errors:
            logger.debug(
                "Quantity %r of %s failed %d rule(s): %s",
                requested_qty,
                purchasable.sku if purchasable is not None else "<missing>",
                len(errors),
                ", ".join(e.code.value for e in errors),
            )
        return errors

    def validate_line_item(
        self, line_item: LineItem, purchasable: Purchasable | None
    ) -> list[ValidationError]:
        """Validate one line item against its purchasable and its order."""
        return self.validate_quantity(
            purchasable,
            line_item.qty,
            self.aggregate_quantity(line_item),
            order=line_item.order,
        )

    @staticmethod
    def aggregate_quantity(line_item: LineItem) -> int:
        """Quantity of the line item's bucket across the owning order.

        Persisted line items are summed by line-item ID; unsaved ones by
        purchasable ID.  An item lands in exactly one bucket, so nothing
        is counted twice.
        """
        order = line_item.order
        items = list(order.items) if order is not None else []
        if not any(item is line_item for item in items):
            items.append(line_item)

        if line_item.id is not None:
            bucket = [item for item in items if item.id == line_item.id]
        else:
            bucket = [
                item
                for item in items
                if item.id is None and item.purchasable_id == line_item.purchasable_id
            ]
        return sum(_as_qty(item.qty) for item in bucket)


def _as_qty(qty: object) -> int:
    if isinstance(qty, bool) or not isinstance(qty, int):
        return 0
    return qty if qty >= 1 else 0
