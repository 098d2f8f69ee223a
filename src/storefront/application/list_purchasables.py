"""Application service: List Purchasables use case (query)."""

from __future__ import annotations

from storefront.application.dto import PurchasableDTO
from storefront.application.lookups import resolve_store
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.purchasable_repository import PurchasableRepository
from storefront.domain.service.price_resolver import PriceResolver
from storefront.domain.service.stock_gate import StockGate


def to_purchasable_dto(
    p: Purchasable, price_resolver: PriceResolver, stock_gate: StockGate
) -> PurchasableDTO:
    # unpriced purchasables are listed, not resolved
    if p.price_override is None and p.base_price is None:
        price = sale_price = "-"
    else:
        resolved = price_resolver.resolve(p)
        price = str(resolved.unit_price)
        sale_price = str(resolved.effective_price)

    return PurchasableDTO(
        id=p.id,  # type: ignore[arg-type]
        sku=p.sku_as_text,
        description=p.description,
        price=price,
        sale_price=sale_price,
        stock="unlimited" if p.has_unlimited_stock else str(p.stock or 0),
        available=stock_gate.is_available(p),
    )


class ListPurchasablesHandler:

    def __init__(
        self,
        purchasable_repo: PurchasableRepository,
        catalog_repo: CatalogRepository,
        price_resolver: PriceResolver | None = None,
        stock_gate: StockGate | None = None,
    ) -> None:
        self._purchasable_repo = purchasable_repo
        self._catalog_repo = catalog_repo
        self._price_resolver = price_resolver or PriceResolver()
        self._stock_gate = stock_gate or StockGate()

    def handle(self, store_id: int | None = None) -> list[PurchasableDTO]:
        store = resolve_store(self._catalog_repo, store_id)
        return [
            to_purchasable_dto(p, self._price_resolver, self._stock_gate)
            for p in self._purchasable_repo.list_all(store.id)
        ]
