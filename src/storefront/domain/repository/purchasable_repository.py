"""Abstract repository for the Purchasable aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Every lookup is scoped to a store because price, stock
and quantity bounds live in a per-store row.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.purchasable import Purchasable


class PurchasableRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique purchasable ID."""

    @abstractmethod
    def get_by_id(self, purchasable_id: int, store_id: int) -> Purchasable | None:
        """Return a purchasable with the given store's data, or None."""

    @abstractmethod
    def get_by_sku(self, sku: str, store_id: int) -> Purchasable | None:
        """Return a purchasable by SKU (case-insensitive), or None."""

    @abstractmethod
    def list_all(self, store_id: int) -> list[Purchasable]:
        """Return every purchasable with the given store's data."""

    @abstractmethod
    def save(self, purchasable: Purchasable) -> None:
        """Persist the catalog row and the per-store row of a purchasable."""

    @abstractmethod
    def delete(self, purchasable: Purchasable) -> None:
        """Remove a purchasable together with all of its per-store rows."""
