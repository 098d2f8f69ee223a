"""Purchasable aggregate.

Purchasables live independently of orders. A line item only holds the
purchasable's ID, so a purchasable can be edited or deleted while orders
that reference it still exist.

One ``Purchasable`` instance carries the catalog row (SKU, dimensions,
categories) together with the per-store row of a single store (price,
stock, quantity bounds, flags).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import InvalidValueError
from storefront.domain.model.sku import is_temp_sku
from storefront.domain.model.value_objects import Dimensions, Money


class PurchasableStatus(Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass
class Purchasable:
    """An orderable catalog item.

    Price overrides (``set_price`` / ``set_promotional_price``) are the
    only way to change the resolved price other than editing the base
    values.  They are not persisted.
    """

    id: int | None
    sku: str
    description: str
    store_id: int
    base_price: Money | None = None
    base_promotional_price: Money | None = None
    dimensions: Dimensions = field(default_factory=Dimensions)
    stock: int | None = None
    has_unlimited_stock: bool = False
    min_qty: int | None = None
    max_qty: int | None = None
    available_for_purchase: bool = True
    status: PurchasableStatus = PurchasableStatus.ENABLED
    promotable: bool = False
    free_shipping: bool = False
    tax_category_id: int | None = None
    shipping_category_id: int | None = None

    _price: Money | None = field(default=None, init=False, repr=False, compare=False)
    _promotional_price: Money | None = field(
        default=None, init=False, repr=False, compare=False
    )

    # --- Price overrides ------------------------------------------------------

    @property
    def price_override(self) -> Money | None:
        return self._price

    @property
    def promotional_price_override(self) -> Money | None:
        return self._promotional_price

    def set_price(self, price: Money | None) -> None:
        self._price = price

    def set_promotional_price(self, price: Money | None) -> None:
        self._promotional_price = price

    # --- Stock ----------------------------------------------------------------

    def has_stock(self) -> bool:
        return self.has_unlimited_stock or (self.stock or 0) > 0

    def deduct_stock(self, qty: int) -> None:
        """Reduce stock after an order completes.

        Unlimited stock is never decremented.  Stock may go negative when
        several orders raced for the last units; availability checks treat
        that as out of stock.
        """
        if qty <= 0:
            raise InvalidValueError("Stock deduction must be positive")
        if self.has_unlimited_stock:
            return
        self.stock = (self.stock or 0) - qty

    # --- Display --------------------------------------------------------------

    @property
    def is_enabled(self) -> bool:
        return self.status == PurchasableStatus.ENABLED

    @property
    def sku_as_text(self) -> str:
        """The SKU, or an empty string while it is still a placeholder."""
        return "" if is_temp_sku(self.sku) else self.sku

    def __str__(self) -> str:
        return self.description or self.sku_as_text
