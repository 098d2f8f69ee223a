"""Domain service: Category Resolution.

A purchasable without an explicit tax or shipping category uses the
default one.  An explicit ID that points nowhere is a configuration
problem, not something to silently paper over with the default.
"""

from __future__ import annotations

from storefront.domain.exceptions import ConfigurationError
from storefront.domain.model.catalog import ShippingCategory, Store, TaxCategory
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.repository.catalog_repository import CatalogRepository


class CategoryResolver:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def store_for(self, purchasable: Purchasable) -> Store:
        store = self._catalog_repo.get_store(purchasable.store_id)
        if store is None:
            raise ConfigurationError(
                f"Unable to retrieve store #{purchasable.store_id} for '{purchasable.sku}'"
            )
        return store

    def tax_category_for(self, purchasable: Purchasable) -> TaxCategory:
        if purchasable.tax_category_id:
            category = self._catalog_repo.get_tax_category(purchasable.tax_category_id)
            if category is None:
                raise ConfigurationError(
                    f"Tax category #{purchasable.tax_category_id} not found"
                )
            return category

        category = self._catalog_repo.default_tax_category()
        if category is None:
            raise ConfigurationError("No default tax category configured")
        return category

    def shipping_category_for(self, purchasable: Purchasable) -> ShippingCategory:
        store = self.store_for(purchasable)

        if purchasable.shipping_category_id:
            category = self._catalog_repo.get_shipping_category(
                purchasable.shipping_category_id, store.id
            )
            if category is None:
                raise ConfigurationError(
                    f"Shipping category #{purchasable.shipping_category_id} "
                    f"not found in store '{store.handle}'"
                )
            return category

        category = self._catalog_repo.default_shipping_category(store.id)
        if category is None:
            raise ConfigurationError(
                f"No default shipping category configured for store '{store.handle}'"
            )
        return category
