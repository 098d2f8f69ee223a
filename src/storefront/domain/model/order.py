"""Order aggregate — owns its line items and notices.

An order is either OPEN or COMPLETED.  While open, every line-item change
re-runs price resolution, stock correction and quantity validation.
Once completed, prices and quantities are historical facts and nothing
re-checks them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import EntityNotFoundError, IllegalStateError
from storefront.domain.model.notice import Notice
from storefront.domain.model.value_objects import Money


class OrderState(Enum):
    OPEN = "OPEN"
    COMPLETED = "COMPLETED"


@dataclass
class LineItem:
    """A purchasable bound into an order with a quantity.

    ``qty`` is deliberately a plain value: an out-of-range quantity is a
    collected validation error, not a construction failure, so the rest
    of the checks can still report.
    """

    id: int | None
    purchasable_id: int | None
    qty: int
    price: Money | None = None
    promotional_price: Money | None = None
    description: str = ""
    sku: str = ""
    weight: Decimal = Decimal("0")
    height: Decimal = Decimal("0")
    length: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    tax_category_id: int | None = None
    shipping_category_id: int | None = None
    order: Order | None = field(default=None, repr=False, compare=False)

    @property
    def sale_price(self) -> Money | None:
        return self.promotional_price if self.promotional_price is not None else self.price

    @property
    def on_promotion(self) -> bool:
        return self.promotional_price is not None

    @property
    def subtotal(self) -> Money:
        sale_price = self.sale_price
        if sale_price is None:
            return Money.zero()
        if not isinstance(self.qty, int) or self.qty < 1:
            return Money.zero(sale_price.currency)
        return sale_price * self.qty

    def field_path(self, attribute: str) -> str:
        """Path used by notices to point at one of this item's fields.

        Unsaved items are keyed by purchasable, which is unique among
        them; ``Order.assign_line_item_id`` re-keys those notices.
        """
        key = self.id if self.id is not None else f"new-{self.purchasable_id}"
        return f"lineItems.{key}.{attribute}"


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``items`` and ``notices`` belong exclusively to the order.  Line items
    added through ``add_line_item`` get their back-reference set; the
    repository does the same when it reconstitutes an order.
    """

    id: int | None
    store_id: int
    items: list[LineItem] = field(default_factory=list)
    notices: list[Notice] = field(default_factory=list)
    state: OrderState = OrderState.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        for item in self.items:
            item.order = self

    # --- Line items -----------------------------------------------------------

    def add_line_item(self, item: LineItem) -> None:
        self._assert_open("add a line item to")
        item.order = self
        self.items.append(item)

    def remove_line_item(self, item: LineItem) -> None:
        self._assert_open("remove a line item from")
        self.items.remove(item)
        item.order = None

    def assign_line_item_id(self, item: LineItem, line_item_id: int) -> None:
        """Give an unsaved line item its ID and move its notices onto it."""
        pending = item.field_path("")
        item.id = line_item_id
        saved = item.field_path("")
        self.notices = [
            replace(n, attribute=saved + n.attribute[len(pending):])
            if n.attribute.startswith(pending)
            else n
            for n in self.notices
        ]

    def find_line_item(self, line_item_id: int) -> LineItem:
        for item in self.items:
            if item.id == line_item_id:
                return item
        raise EntityNotFoundError(
            f"Line item #{line_item_id} not found on order #{self.id}"
        )

    def find_line_item_for(self, purchasable_id: int) -> LineItem | None:
        for item in self.items:
            if item.purchasable_id == purchasable_id:
                return item
        return None

    # --- Notices --------------------------------------------------------------

    def add_notice(self, notice: Notice) -> None:
        self.notices.append(notice)

    # --- State transitions ----------------------------------------------------

    @property
    def is_completed(self) -> bool:
        return self.state == OrderState.COMPLETED

    def complete(self) -> None:
        """Transition OPEN -> COMPLETED.  There is no way back."""
        if self.is_completed:
            raise IllegalStateError(f"Order #{self.id} is already completed")
        self.state = OrderState.COMPLETED
        self.completed_at = datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        subtotals = [item.subtotal for item in self.items if item.sale_price is not None]
        result = Money.zero(subtotals[0].currency if subtotals else "USD")
        for subtotal in subtotals:
            result = result + subtotal
        return result

    @property
    def total_qty(self) -> int:
        return sum(item.qty for item in self.items if isinstance(item.qty, int))

    # --- Internal helpers -----------------------------------------------------

    def _assert_open(self, action: str) -> None:
        if self.is_completed:
            raise IllegalStateError(f"Cannot {action} completed order #{self.id}")
