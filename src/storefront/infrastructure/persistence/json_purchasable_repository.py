"""JSON-file-backed implementation of PurchasableRepository.

The file holds two tables, mirroring a relational layout:

* ``purchasables`` — one row per purchasable (SKU, description,
  dimensions, categories);
* ``purchasable_stores`` — one row per (purchasable, store) with price,
  promotional price, stock, quantity bounds and flags.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.purchasable import Purchasable, PurchasableStatus
from storefront.domain.model.value_objects import Dimensions, Money
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.infrastructure.persistence._json_file import (
    decimal_or_none,
    ensure_file,
    read_json,
    str_or_none,
    write_json,
)

_EMPTY = {"purchasables": [], "purchasable_stores": []}


class JsonPurchasableRepository(PurchasableRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path, _EMPTY)

    # --- PurchasableRepository interface --------------------------------------

    def next_id(self) -> int:
        rows = read_json(self._file_path)["purchasables"]
        if not rows:
            return 1
        return max(row["id"] for row in rows) + 1

    def get_by_id(self, purchasable_id: int, store_id: int) -> Purchasable | None:
        data = read_json(self._file_path)
        for row in data["purchasables"]:
            if row["id"] == purchasable_id:
                return self._to_domain(row, self._store_row(data, purchasable_id, store_id), store_id)
        return None

    def get_by_sku(self, sku: str, store_id: int) -> Purchasable | None:
        data = read_json(self._file_path)
        for row in data["purchasables"]:
            if row["sku"].lower() == sku.lower():
                return self._to_domain(row, self._store_row(data, row["id"], store_id), store_id)
        return None

    def list_all(self, store_id: int) -> list[Purchasable]:
        data = read_json(self._file_path)
        return [
            self._to_domain(row, self._store_row(data, row["id"], store_id), store_id)
            for row in data["purchasables"]
        ]

    def save(self, purchasable: Purchasable) -> None:
        if purchasable.id is None:
            purchasable.id = self.next_id()

        data = read_json(self._file_path)
        data["purchasables"] = [
            row for row in data["purchasables"] if row["id"] != purchasable.id
        ] + [self._to_raw(purchasable)]
        data["purchasable_stores"] = [
            row
            for row in data["purchasable_stores"]
            if (row["purchasable_id"], row["store_id"])
            != (purchasable.id, purchasable.store_id)
        ] + [self._to_raw_store(purchasable)]
        write_json(self._file_path, data)

    def delete(self, purchasable: Purchasable) -> None:
        data = read_json(self._file_path)
        data["purchasables"] = [
            row for row in data["purchasables"] if row["id"] != purchasable.id
        ]
        data["purchasable_stores"] = [
            row for row in data["purchasable_stores"] if row["purchasable_id"] != purchasable.id
        ]
        write_json(self._file_path, data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _store_row(data: dict, purchasable_id: int, store_id: int) -> dict:
        for row in data["purchasable_stores"]:
            if row["purchasable_id"] == purchasable_id and row["store_id"] == store_id:
                return row
        # not stocked in this store: unpriced and unavailable
        return {"available_for_purchase": False, "stock": 0}

    @staticmethod
    def _to_domain(row: dict, store_row: dict, store_id: int) -> Purchasable:
        currency = store_row.get("currency", "USD")
        base_price = store_row.get("base_price")
        base_promotional_price = store_row.get("base_promotional_price")
        return Purchasable(
            id=row["id"],
            sku=row["sku"],
            description=row.get("description", ""),
            store_id=store_id,
            base_price=Money.of(base_price, currency) if base_price is not None else None,
            base_promotional_price=(
                Money.of(base_promotional_price, currency)
                if base_promotional_price is not None
                else None
            ),
            dimensions=Dimensions(
                width=decimal_or_none(row.get("width")),
                height=decimal_or_none(row.get("height")),
                length=decimal_or_none(row.get("length")),
                weight=decimal_or_none(row.get("weight")),
            ),
            stock=store_row.get("stock"),
            has_unlimited_stock=store_row.get("has_unlimited_stock", False),
            min_qty=store_row.get("min_qty"),
            max_qty=store_row.get("max_qty"),
            available_for_purchase=store_row.get("available_for_purchase", True),
            status=PurchasableStatus(row.get("status", "enabled")),
            promotable=store_row.get("promotable", False),
            free_shipping=store_row.get("free_shipping", False),
            tax_category_id=row.get("tax_category_id"),
            shipping_category_id=row.get("shipping_category_id"),
        )

    @staticmethod
    def _to_raw(p: Purchasable) -> dict:
        return {
            "id": p.id,
            "sku": p.sku,
            "description": p.description,
            "status": p.status.value,
            "width": str_or_none(p.dimensions.width),
            "height": str_or_none(p.dimensions.height),
            "length": str_or_none(p.dimensions.length),
            "weight": str_or_none(p.dimensions.weight),
            "tax_category_id": p.tax_category_id,
            "shipping_category_id": p.shipping_category_id,
        }

    @staticmethod
    def _to_raw_store(p: Purchasable) -> dict:
        currency = (p.base_price or p.base_promotional_price or Money.zero()).currency
        return {
            "purchasable_id": p.id,
            "store_id": p.store_id,
            "currency": currency,
            "base_price": str_or_none(p.base_price.amount if p.base_price else None),
            "base_promotional_price": str_or_none(
                p.base_promotional_price.amount if p.base_promotional_price else None
            ),
            "stock": p.stock,
            "has_unlimited_stock": p.has_unlimited_stock,
            "min_qty": p.min_qty,
            "max_qty": p.max_qty,
            "available_for_purchase": p.available_for_purchase,
            "promotable": p.promotable,
            "free_shipping": p.free_shipping,
        }
