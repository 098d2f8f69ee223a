"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import LineItem, Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def line_items_for(self, order_id: int) -> list[LineItem]:
        """Return the persisted line items of an order (empty if unknown)."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        Assigns IDs to the order and to any line item that has none.
        """
