"""Validation records for line-item rules.

A ``ValidationError`` is data, not an exception: rules return lists of
them so a caller can show every problem at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    PURCHASABLE_MISSING = "purchasableMissing"
    PURCHASABLE_DISABLED = "purchasableDisabled"
    OUT_OF_STOCK = "outOfStock"
    INSUFFICIENT_STOCK = "insufficientStock"
    BELOW_MINIMUM = "belowMinimumQty"
    ABOVE_MAXIMUM = "aboveMaximumQty"
    INVALID_QUANTITY = "invalidQty"


@dataclass(frozen=True)
class ValidationError:
    attribute: str  # "purchasableId" or "qty"
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message
