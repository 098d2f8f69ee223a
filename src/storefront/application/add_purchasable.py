"""Application service: Add Purchasable use case."""

from __future__ import annotations

import logging

from storefront.application.dto import PurchasableDTO, PurchasableSpec
from storefront.application.list_purchasables import to_purchasable_dto
from storefront.application.lookups import (
    check_categories,
    require_unique_sku,
    resolve_store,
)
from storefront.domain.exceptions import InvalidValueError
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.model.sku import temp_sku
from storefront.domain.model.value_objects import Dimensions, Money
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.price_resolver import PriceResolver
from storefront.domain.service.stock_gate import StockGate

logger = logging.getLogger(__name__)


class AddPurchasableHandler:

    def __init__(
        self,
        purchasable_repo: PurchasableRepository,
        catalog_repo: CatalogRepository,
        currency: str = "USD",
    ) -> None:
        self._purchasable_repo = purchasable_repo
        self._catalog_repo = catalog_repo
        self._currency = currency

    def handle(self, spec: PurchasableSpec) -> PurchasableDTO:
        """Add a new purchasable to the catalog of one store.

        A blank SKU is replaced by a temporary one; such a purchasable is
        saved but cannot be bought until it gets a real SKU.
        """
        if not spec.description or not spec.description.strip():
            raise InvalidValueError("Description is required")

        store = resolve_store(self._catalog_repo, spec.store_id)

        sku = (spec.sku or "").strip() or temp_sku()
        require_unique_sku(self._purchasable_repo, sku, store.id)

        if not spec.unlimited_stock and spec.stock is None:
            raise InvalidValueError("Stock is required unless stock is unlimited")

        check_categories(
            self._catalog_repo, spec.tax_category_id, spec.shipping_category_id, store.id
        )

        purchasable = Purchasable(
            id=self._purchasable_repo.next_id(),
            sku=sku,
            description=spec.description.strip(),
            store_id=store.id,
            base_price=self._money(spec.price),
            base_promotional_price=self._money(spec.promotional_price),
            dimensions=Dimensions.of(
                width=spec.width,
                height=spec.height,
                length=spec.length,
                weight=spec.weight,
            ),
            stock=spec.stock,
            has_unlimited_stock=spec.unlimited_stock,
            min_qty=spec.min_qty,
            max_qty=spec.max_qty,
            tax_category_id=spec.tax_category_id,
            shipping_category_id=spec.shipping_category_id,
        )
        self._purchasable_repo.save(purchasable)
        logger.info("Added purchasable #%s '%s' to store %s", purchasable.id, sku, store.handle)

        return to_purchasable_dto(purchasable, PriceResolver(), StockGate())

    def _money(self, amount: str | None) -> Money | None:
        if amount is None or amount == "":
            return None
        return Money.of(amount, self._currency)
