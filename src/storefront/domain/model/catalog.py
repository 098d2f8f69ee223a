"""Catalog reference data: stores and tax / shipping categories."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    """A storefront with its own prices and stock for each purchasable."""

    id: int
    handle: str
    name: str
    primary: bool = False


@dataclass(frozen=True)
class TaxCategory:
    id: int
    handle: str
    name: str
    default: bool = False


@dataclass(frozen=True)
class ShippingCategory:
    id: int
    handle: str
    name: str
    store_id: int
    default: bool = False
