"""Abstract repository for catalog reference data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import ShippingCategory, Store, TaxCategory


class CatalogRepository(ABC):

    @abstractmethod
    def get_store(self, store_id: int) -> Store | None:
        """Return a store by ID, or None."""

    @abstractmethod
    def primary_store(self) -> Store | None:
        """Return the primary store, or None if none is configured."""

    @abstractmethod
    def get_tax_category(self, category_id: int) -> TaxCategory | None:
        """Return a tax category by ID, or None."""

    @abstractmethod
    def default_tax_category(self) -> TaxCategory | None:
        """Return the default tax category, or None."""

    @abstractmethod
    def get_shipping_category(
        self, category_id: int, store_id: int
    ) -> ShippingCategory | None:
        """Return a shipping category of the given store, or None."""

    @abstractmethod
    def default_shipping_category(self, store_id: int) -> ShippingCategory | None:
        """Return the store's default shipping category, or None."""
