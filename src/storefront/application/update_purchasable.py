"""Application service: Update Purchasable use case.

Edits only touch the catalog.  Open orders pick the new price or stock
up the next time they are refreshed; completed orders never do.
"""

from __future__ import annotations

import logging

from storefront.application.dto import PurchasableChanges, PurchasableDTO
from storefront.application.list_purchasables import to_purchasable_dto
from storefront.application.lookups import (
    check_categories,
    require_purchasable,
    require_unique_sku,
    resolve_store,
)
from storefront.domain.exceptions import InvalidValueError
from storefront.domain.model.purchasable import PurchasableStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.price_resolver import PriceResolver
from storefront.domain.service.stock_gate import StockGate

logger = logging.getLogger(__name__)


class UpdatePurchasableHandler:

    def __init__(
        self,
        purchasable_repo: PurchasableRepository,
        catalog_repo: CatalogRepository,
        currency: str = "USD",
    ) -> None:
        self._purchasable_repo = purchasable_repo
        self._catalog_repo = catalog_repo
        self._currency = currency

    def handle(
        self,
        purchasable_id: int,
        changes: PurchasableChanges,
        store_id: int | None = None,
    ) -> PurchasableDTO:
        """Apply *changes* to one purchasable.

        Setting a SKU is how a purchasable saved with a temporary SKU
        becomes available for sale.
        """
        store = resolve_store(self._catalog_repo, store_id)
        p = require_purchasable(self._purchasable_repo, purchasable_id, store.id)

        if changes.sku is not None:
            sku = changes.sku.strip()
            if not sku:
                raise InvalidValueError("SKU cannot be blank")
            require_unique_sku(self._purchasable_repo, sku, store.id, exclude_id=p.id)
            p.sku = sku
        if changes.description is not None:
            if not changes.description.strip():
                raise InvalidValueError("Description is required")
            p.description = changes.description.strip()
        if changes.price is not None:
            p.base_price = Money.of(changes.price, self._currency)
        if changes.clear_promotional_price:
            p.base_promotional_price = None
        elif changes.promotional_price is not None:
            p.base_promotional_price = Money.of(changes.promotional_price, self._currency)
        if changes.stock is not None:
            p.stock = changes.stock
        if changes.unlimited_stock is not None:
            p.has_unlimited_stock = changes.unlimited_stock
        if changes.min_qty is not None:
            p.min_qty = changes.min_qty
        if changes.max_qty is not None:
            p.max_qty = changes.max_qty
        if changes.enabled is not None:
            p.status = (
                PurchasableStatus.ENABLED if changes.enabled else PurchasableStatus.DISABLED
            )
        if changes.available_for_purchase is not None:
            p.available_for_purchase = changes.available_for_purchase

        check_categories(
            self._catalog_repo, changes.tax_category_id, changes.shipping_category_id, store.id
        )
        if changes.tax_category_id is not None:
            p.tax_category_id = changes.tax_category_id
        if changes.shipping_category_id is not None:
            p.shipping_category_id = changes.shipping_category_id

        if not p.has_unlimited_stock and p.stock is None:
            raise InvalidValueError("Stock is required unless stock is unlimited")

        self._purchasable_repo.save(p)
        logger.info("Updated purchasable #%s in store %s", p.id, store.handle)
        return to_purchasable_dto(p, PriceResolver(), StockGate())
