"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.category_resolver import CategoryResolver
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer
from storefront.domain.service.price_resolver import PriceResolver
from storefront.domain.service.stock_gate import StockGate
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_purchasable_repository import (
    JsonPurchasableRepository,
)


def settings() -> Settings:
    return get_settings()


def purchasable_repository() -> JsonPurchasableRepository:
    return JsonPurchasableRepository(settings().data_dir / "purchasables.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(settings().data_dir / "catalog.json")


def stock_gate() -> StockGate:
    return StockGate()


def line_item_synchronizer() -> LineItemSynchronizer:
    return LineItemSynchronizer(
        price_resolver=PriceResolver(),
        stock_gate=stock_gate(),
        category_resolver=CategoryResolver(catalog_repository()),
    )
