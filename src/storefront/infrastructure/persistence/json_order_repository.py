"""JSON-file-backed implementation of OrderRepository.

The file holds the orders plus a line-item ID counter.  The counter only
ever grows, so a removed line item's ID is never handed out again.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.notice import Notice, NoticeType
from storefront.domain.model.order import LineItem, Order, OrderState
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence._json_file import (
    ensure_file,
    read_json,
    write_json,
)


_EMPTY = {"next_line_item_id": 1, "orders": []}


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path, _EMPTY)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = read_json(self._file_path)["orders"]
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in read_json(self._file_path)["orders"]:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def line_items_for(self, order_id: int) -> list[LineItem]:
        order = self.get_by_id(order_id)
        return list(order.items) if order is not None else []

    def save(self, order: Order) -> None:
        data = read_json(self._file_path)
        orders = data["orders"]

        if order.id is None:
            order.id = self.next_id()

        next_item_id = data["next_line_item_id"]
        for item in order.items:
            if item.id is None:
                order.assign_line_item_id(item, next_item_id)
            next_item_id = max(next_item_id, item.id + 1)
        data["next_line_item_id"] = next_item_id

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        write_json(self._file_path, data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _money_to_raw(money: Money | None) -> dict | None:
        if money is None:
            return None
        return {"amount": str(money.amount), "currency": money.currency}

    @staticmethod
    def _money_from_raw(raw: dict | None) -> Money | None:
        if raw is None:
            return None
        return Money(Decimal(raw["amount"]), raw.get("currency", "USD"))

    @classmethod
    def _to_raw(cls, order: Order) -> dict:
        return {
            "id": order.id,
            "store_id": order.store_id,
            "state": order.state.value,
            "created_at": order.created_at.isoformat(),
            "completed_at": order.completed_at.isoformat() if order.completed_at else None,
            "items": [
                {
                    "id": item.id,
                    "purchasable_id": item.purchasable_id,
                    "qty": item.qty,
                    "price": cls._money_to_raw(item.price),
                    "promotional_price": cls._money_to_raw(item.promotional_price),
                    "description": item.description,
                    "sku": item.sku,
                    "weight": str(item.weight),
                    "height": str(item.height),
                    "length": str(item.length),
                    "width": str(item.width),
                    "tax_category_id": item.tax_category_id,
                    "shipping_category_id": item.shipping_category_id,
                }
                for item in order.items
            ],
            "notices": [
                {
                    "type": n.type.value,
                    "attribute": n.attribute,
                    "message": n.message,
                    "created_at": n.created_at.isoformat(),
                }
                for n in order.notices
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Order:
        items = [
            LineItem(
                id=i["id"],
                purchasable_id=i["purchasable_id"],
                qty=i["qty"],
                price=cls._money_from_raw(i.get("price")),
                promotional_price=cls._money_from_raw(i.get("promotional_price")),
                description=i.get("description", ""),
                sku=i.get("sku", ""),
                weight=Decimal(i.get("weight", "0")),
                height=Decimal(i.get("height", "0")),
                length=Decimal(i.get("length", "0")),
                width=Decimal(i.get("width", "0")),
                tax_category_id=i.get("tax_category_id"),
                shipping_category_id=i.get("shipping_category_id"),
            )
            for i in raw["items"]
        ]
        notices = [
            Notice(
                type=NoticeType(n["type"]),
                attribute=n["attribute"],
                message=n["message"],
                created_at=datetime.fromisoformat(n["created_at"]),
            )
            for n in raw.get("notices", [])
        ]
        completed_at = raw.get("completed_at")
        # Order.__post_init__ wires the line items' back-references
        return Order(
            id=raw["id"],
            store_id=raw["store_id"],
            items=items,
            notices=notices,
            state=OrderState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            completed_at=datetime.fromisoformat(completed_at) if completed_at else None,
        )
