"""Named quantity rules for line items.

Each rule takes a ``RuleContext`` and returns a (possibly empty) list of
ValidationErrors.  Rules do not short-circuit each other: the stock gate
runs all of them so several problems can be reported together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from storefront.domain.model.purchasable import Purchasable
from storefront.domain.model.validation import ErrorCode, ValidationError


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at.

    ``aggregate_qty`` is the quantity of this purchasable across the
    whole order, not just the line item being validated.
    """

    purchasable: Purchasable | None
    requested_qty: object
    aggregate_qty: int

    @property
    def description(self) -> str:
        return str(self.purchasable) if self.purchasable is not None else ""


Rule = Callable[[RuleContext], list[ValidationError]]


def purchasable_enabled(ctx: RuleContext) -> list[ValidationError]:
    if ctx.purchasable is None:
        return [
            ValidationError(
                "purchasableId", ErrorCode.PURCHASABLE_MISSING, "No purchasable available."
            )
        ]
    if not ctx.purchasable.is_enabled:
        return [
            ValidationError(
                "purchasableId",
                ErrorCode.PURCHASABLE_DISABLED,
                "The item is not enabled for sale.",
            )
        ]
    return []


def in_stock(ctx: RuleContext) -> list[ValidationError]:
    if ctx.purchasable is None or ctx.purchasable.has_stock():
        return []
    return [
        ValidationError(
            "qty",
            ErrorCode.OUT_OF_STOCK,
            f"“{ctx.description}” is currently out of stock.",
        )
    ]


def sufficient_stock(ctx: RuleContext) -> list[ValidationError]:
    p = ctx.purchasable
    if p is None or p.has_unlimited_stock or not p.has_stock():
        return []
    if ctx.aggregate_qty > p.stock:
        return [
            ValidationError(
                "qty",
                ErrorCode.INSUFFICIENT_STOCK,
                f"There are only {p.stock} “{ctx.description}” items left in stock.",
            )
        ]
    return []


def minimum_quantity(ctx: RuleContext) -> list[ValidationError]:
    p = ctx.purchasable
    if p is None or p.min_qty is None or p.min_qty <= 1:
        return []
    if ctx.aggregate_qty < p.min_qty:
        return [
            ValidationError(
                "qty",
                ErrorCode.BELOW_MINIMUM,
                f"Minimum order quantity for this item is {p.min_qty}.",
            )
        ]
    return []


def maximum_quantity(ctx: RuleContext) -> list[ValidationError]:
    p = ctx.purchasable
    # 0 and None both mean "no cap"
    if p is None or not p.max_qty:
        return []
    if ctx.aggregate_qty > p.max_qty:
        return [
            ValidationError(
                "qty",
                ErrorCode.ABOVE_MAXIMUM,
                f"Maximum order quantity for this item is {p.max_qty}.",
            )
        ]
    return []


def positive_quantity(ctx: RuleContext) -> list[ValidationError]:
    qty = ctx.requested_qty
    # bool is an int subclass but never a quantity
    if isinstance(qty, int) and not isinstance(qty, bool) and qty >= 1:
        return []
    return [
        ValidationError(
            "qty", ErrorCode.INVALID_QUANTITY, "Quantity must be a whole number of at least 1."
        )
    ]


DEFAULT_RULES: tuple[Rule, ...] = (
    purchasable_enabled,
    in_stock,
    sufficient_stock,
    minimum_quantity,
    maximum_quantity,
    positive_quantity,
)
