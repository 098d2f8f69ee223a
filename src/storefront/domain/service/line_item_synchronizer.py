"""Domain service: Line Item Synchronization.

Brings a line item in line with its purchasable before the order is
saved.  There is no stock reservation, so when a customer holds more
units than are left, the quantity is quietly lowered and a notice tells
them afterwards.  That correction never blocks the save.

Pricing is kept apart from ``populate`` so a line item can be re-priced
without re-running the stock correction and vice versa;
``populate_and_validate`` runs both plus the stock gate in one go.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.domain.model.notice import Notice, NoticeType
from storefront.domain.model.order import LineItem
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.model.validation import ValidationError
from storefront.domain.service.category_resolver import CategoryResolver
from storefront.domain.service.price_resolver import PriceResolver, ResolvedPrice
from storefront.domain.service.stock_gate import StockGate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    notices: list[Notice] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class LineItemSynchronizer:

    def __init__(
        self,
        price_resolver: PriceResolver | None = None,
        stock_gate: StockGate | None = None,
        category_resolver: CategoryResolver | None = None,
    ) -> None:
        self._price_resolver = price_resolver or PriceResolver()
        self._stock_gate = stock_gate or StockGate()
        self._category_resolver = category_resolver

    def populate(self, line_item: LineItem, purchasable: Purchasable) -> list[Notice]:
        """Copy stock-dependent and physical attributes onto *line_item*.

        Mutates the line item in place.  Notices are appended to the
        owning order and also returned.
        """
        notices: list[Notice] = []
        order = line_item.order

        if order is not None and not order.is_completed:
            stock = purchasable.stock or 0
            if (
                not purchasable.has_unlimited_stock
                and isinstance(line_item.qty, int)
                and line_item.qty > stock
            ):
                description = line_item.description or str(purchasable)
                notice = Notice(
                    type=NoticeType.QUANTITY_CHANGED,
                    attribute=line_item.field_path("qty"),
                    message=f"{description} only has {stock} in stock.",
                )
                logger.info(
                    "Clamped %s on order #%s from %d to %d",
                    purchasable.sku, order.id, line_item.qty, stock,
                )
                order.add_notice(notice)
                notices.append(notice)
                line_item.qty = stock

        for name, value in purchasable.dimensions.or_zero().items():
            setattr(line_item, name, value)

        line_item.purchasable_id = purchasable.id
        line_item.description = str(purchasable)
        line_item.sku = purchasable.sku_as_text

        if self._category_resolver is not None:
            line_item.tax_category_id = self._category_resolver.tax_category_for(purchasable).id
            line_item.shipping_category_id = self._category_resolver.shipping_category_for(
                purchasable
            ).id

        return notices

    def apply_price(self, line_item: LineItem, resolved: ResolvedPrice) -> list[Notice]:
        """Write a resolved price onto *line_item*.

        Emits a notice when a line item that already had a sale price
        ends up with a different one.  Completed orders keep their
        historical prices untouched.
        """
        order = line_item.order
        if order is not None and order.is_completed:
            return []

        previous = line_item.sale_price
        line_item.price = resolved.unit_price
        line_item.promotional_price = resolved.promotional_price

        if previous is None or previous == resolved.effective_price:
            return []

        notice = Notice(
            type=NoticeType.SALE_PRICE_CHANGED,
            attribute=line_item.field_path("salePrice"),
            message=(
                f"The price of {line_item.description or 'an item'} changed "
                f"from {previous} to {resolved.effective_price}."
            ),
        )
        if order is not None:
            order.add_notice(notice)
        return [notice]

    def populate_and_validate(
        self, line_item: LineItem, purchasable: Purchasable | None
    ) -> SyncResult:
        """Populate, re-price and validate a line item before it is saved.

        A missing purchasable skips population and pricing; the stock
        gate reports it.  ConfigurationError from price resolution is
        not caught.
        """
        order = line_item.order
        if order is not None and order.is_completed:
            return SyncResult()

        notices: list[Notice] = []
        if purchasable is not None:
            notices.extend(self.populate(line_item, purchasable))
            notices.extend(
                self.apply_price(line_item, self._price_resolver.resolve(purchasable))
            )

        errors = self._stock_gate.validate_line_item(line_item, purchasable)
        return SyncResult(notices=notices, errors=errors)
