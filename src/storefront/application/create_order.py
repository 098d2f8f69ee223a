"""Application service: Create Order use case."""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.application.lookups import resolve_store
from storefront.domain.model.order import Order
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog_repo: CatalogRepository,
    ) -> None:
        self._order_repo = order_repo
        self._catalog_repo = catalog_repo

    def handle(self, store_id: int | None = None) -> OrderDTO:
        """Open an empty order in a store (the primary store by default)."""
        store = resolve_store(self._catalog_repo, store_id)

        order = Order(id=None, store_id=store.id)
        self._order_repo.save(order)
        logger.info("Created order #%s in store %s", order.id, store.handle)

        return to_order_dto(order)
