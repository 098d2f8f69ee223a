"""Application service: Delete Purchasable use case.

Line items referencing the purchasable are left alone; the next refresh
of their order notices the purchasable is gone.
"""

from __future__ import annotations

import logging

from storefront.application.lookups import require_purchasable, resolve_store
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository

logger = logging.getLogger(__name__)


class DeletePurchasableHandler:

    def __init__(
        self,
        purchasable_repo: PurchasableRepository,
        catalog_repo: CatalogRepository,
    ) -> None:
        self._purchasable_repo = purchasable_repo
        self._catalog_repo = catalog_repo

    def handle(self, purchasable_id: int, store_id: int | None = None) -> None:
        store = resolve_store(self._catalog_repo, store_id)
        purchasable = require_purchasable(self._purchasable_repo, purchasable_id, store.id)
        self._purchasable_repo.delete(purchasable)
        logger.info("Deleted purchasable #%s '%s'", purchasable.id, purchasable.sku)
