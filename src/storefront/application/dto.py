"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.notice import Notice
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class PurchasableSpec:
    """Input: a new catalog item."""

    sku: str
    description: str
    price: str | None = None
    promotional_price: str | None = None
    stock: int | None = None
    unlimited_stock: bool = False
    min_qty: int | None = None
    max_qty: int | None = None
    weight: str | None = None
    width: str | None = None
    height: str | None = None
    length: str | None = None
    tax_category_id: int | None = None
    shipping_category_id: int | None = None
    store_id: int | None = None


@dataclass(frozen=True)
class PurchasableChanges:
    """Input: edits to an existing catalog item.  ``None`` means unchanged."""

    sku: str | None = None
    description: str | None = None
    price: str | None = None
    promotional_price: str | None = None
    clear_promotional_price: bool = False
    stock: int | None = None
    unlimited_stock: bool | None = None
    min_qty: int | None = None
    max_qty: int | None = None
    enabled: bool | None = None
    available_for_purchase: bool | None = None
    tax_category_id: int | None = None
    shipping_category_id: int | None = None


@dataclass(frozen=True)
class PurchasableDTO:
    """Output: a catalog item as displayed to the user."""

    id: int
    sku: str
    description: str
    price: str  # formatted, e.g. "$15.00"; "-" when unpriced
    sale_price: str
    stock: str  # "unlimited" or a number
    available: bool


@dataclass(frozen=True)
class LineItemDTO:
    id: int | None
    sku: str
    description: str
    qty: int
    price: str
    sale_price: str
    subtotal: str
    on_promotion: bool


@dataclass(frozen=True)
class NoticeDTO:
    type: str
    attribute: str
    message: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    store_id: int
    state: str
    items: list[LineItemDTO]
    notices: list[NoticeDTO]
    total: str
    created_at: str
    completed_at: str | None = None


@dataclass(frozen=True)
class OrderChangeDTO:
    """Output: an order after a mutation, plus what the mutation caused."""

    order: OrderDTO
    notices: list[NoticeDTO] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


# --- Mapping ------------------------------------------------------------------


def _fmt(money) -> str:
    return str(money) if money is not None else "-"


def to_notice_dto(notice: Notice) -> NoticeDTO:
    return NoticeDTO(
        type=notice.type.value,
        attribute=notice.attribute,
        message=notice.message,
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        store_id=order.store_id,
        state=order.state.value,
        items=[
            LineItemDTO(
                id=item.id,
                sku=item.sku,
                description=item.description,
                qty=item.qty,
                price=_fmt(item.price),
                sale_price=_fmt(item.sale_price),
                subtotal=str(item.subtotal),
                on_promotion=item.on_promotion,
            )
            for item in order.items
        ],
        notices=[to_notice_dto(n) for n in order.notices],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        completed_at=(
            order.completed_at.strftime("%Y-%m-%d %H:%M UTC")
            if order.completed_at is not None
            else None
        ),
    )
