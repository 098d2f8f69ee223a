"""JSON-file-backed implementation of CatalogRepository.

A fresh data directory is seeded with one primary store and a default
tax and shipping category, which is all a single-store shop needs.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.catalog import ShippingCategory, Store, TaxCategory
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.persistence._json_file import ensure_file, read_json

DEFAULT_CATALOG = {
    "stores": [{"id": 1, "handle": "primary", "name": "Primary store", "primary": True}],
    "tax_categories": [
        {"id": 1, "handle": "general", "name": "General", "default": True},
    ],
    "shipping_categories": [
        {"id": 1, "handle": "general", "name": "General", "store_id": 1, "default": True},
    ],
}


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path, DEFAULT_CATALOG)

    # --- Stores ---------------------------------------------------------------

    def get_store(self, store_id: int) -> Store | None:
        for row in self._load()["stores"]:
            if row["id"] == store_id:
                return Store(**row)
        return None

    def primary_store(self) -> Store | None:
        for row in self._load()["stores"]:
            if row.get("primary"):
                return Store(**row)
        return None

    # --- Tax categories -------------------------------------------------------

    def get_tax_category(self, category_id: int) -> TaxCategory | None:
        for row in self._load()["tax_categories"]:
            if row["id"] == category_id:
                return TaxCategory(**row)
        return None

    def default_tax_category(self) -> TaxCategory | None:
        for row in self._load()["tax_categories"]:
            if row.get("default"):
                return TaxCategory(**row)
        return None

    # --- Shipping categories --------------------------------------------------

    def get_shipping_category(
        self, category_id: int, store_id: int
    ) -> ShippingCategory | None:
        for row in self._load()["shipping_categories"]:
            if row["id"] == category_id and row["store_id"] == store_id:
                return ShippingCategory(**row)
        return None

    def default_shipping_category(self, store_id: int) -> ShippingCategory | None:
        for row in self._load()["shipping_categories"]:
            if row["store_id"] == store_id and row.get("default"):
                return ShippingCategory(**row)
        return None

    def _load(self) -> dict:
        return read_json(self._file_path)
