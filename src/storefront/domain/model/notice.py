"""Order notices — advisory records of automatic corrections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NoticeType(Enum):
    QUANTITY_CHANGED = "lineItemQuantityChanged"
    SALE_PRICE_CHANGED = "lineItemSalePriceChanged"
    LINE_ITEM_REMOVED = "lineItemRemoved"


@dataclass(frozen=True)
class Notice:
    """Something on the order was changed without the customer asking.

    Notices never block a save; they are appended to the order and shown
    to the customer afterwards.
    """

    type: NoticeType
    attribute: str  # field path, e.g. "lineItems.7.qty"
    message: str
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )
