"""Shared lookups used by several handlers."""

from __future__ import annotations

from storefront.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidValueError,
)
from storefront.domain.model.catalog import Store
from storefront.domain.model.order import Order
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository


def require_order(order_repo: OrderRepository, order_id: int) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order


def require_purchasable(
    purchasable_repo: PurchasableRepository, purchasable_id: int, store_id: int
) -> Purchasable:
    purchasable = purchasable_repo.get_by_id(purchasable_id, store_id)
    if purchasable is None:
        raise EntityNotFoundError(f"Purchasable #{purchasable_id} not found")
    return purchasable


def resolve_store(catalog_repo: CatalogRepository, store_id: int | None) -> Store:
    """Return the requested store, or the primary store when none is given."""
    if store_id is None:
        store = catalog_repo.primary_store()
        if store is None:
            raise ConfigurationError("No primary store configured")
        return store

    store = catalog_repo.get_store(store_id)
    if store is None:
        raise ConfigurationError(f"Store #{store_id} does not exist")
    return store


def check_categories(
    catalog_repo: CatalogRepository,
    tax_category_id: int | None,
    shipping_category_id: int | None,
    store_id: int,
) -> None:
    """Refuse category ids that do not exist (shipping categories are per store)."""
    if tax_category_id and catalog_repo.get_tax_category(tax_category_id) is None:
        raise ConfigurationError(f"Tax category #{tax_category_id} not found")
    if shipping_category_id and catalog_repo.get_shipping_category(
        shipping_category_id, store_id
    ) is None:
        raise ConfigurationError(f"Shipping category #{shipping_category_id} not found")


def require_unique_sku(
    purchasable_repo: PurchasableRepository,
    sku: str,
    store_id: int,
    exclude_id: int | None = None,
) -> None:
    """SKUs are unique per store, ignoring case."""
    existing = purchasable_repo.get_by_sku(sku, store_id)
    if existing is not None and existing.id != exclude_id:
        raise InvalidValueError(f"SKU '{sku}' already exists")
