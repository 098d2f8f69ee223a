"""Domain service: Price Resolution.

Works out what a purchasable costs right now.  An explicitly set price
wins over the base price; a promotional price only counts when it is
strictly cheaper than that price, so a promotion can never raise the
price.

Nothing is cached between calls: editing the base price after a
resolution is reflected by the next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.exceptions import ConfigurationError
from storefront.domain.model.purchasable import Purchasable
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPrice:
    """Price snapshot of one purchasable at one point in time."""

    unit_price: Money
    promotional_price: Money | None = None

    @property
    def effective_price(self) -> Money:
        return self.promotional_price if self.promotional_price is not None else self.unit_price

    @property
    def on_promotion(self) -> bool:
        return self.promotional_price is not None


class PriceResolver:

    def resolve(self, purchasable: Purchasable) -> ResolvedPrice:
        """Resolve unit and promotional price.

        Raises ConfigurationError when the purchasable has neither a
        price override nor a base price.
        """
        unit_price = self.unit_price(purchasable)

        promotional = purchasable.promotional_price_override
        if promotional is None:
            promotional = purchasable.base_promotional_price

        if promotional is not None and not promotional < unit_price:
            logger.debug(
                "Ignoring promotional price %s for %s (not below %s)",
                promotional, purchasable.sku, unit_price,
            )
            promotional = None

        return ResolvedPrice(unit_price=unit_price, promotional_price=promotional)

    def unit_price(self, purchasable: Purchasable) -> Money:
        price = purchasable.price_override
        if price is None:
            price = purchasable.base_price
        if price is None:
            raise ConfigurationError(
                f"No price can be determined for '{purchasable.sku}'"
            )
        return price

    def promotional_price(self, purchasable: Purchasable) -> Money | None:
        return self.resolve(purchasable).promotional_price

    def effective_price(self, purchasable: Purchasable) -> Money:
        return self.resolve(purchasable).effective_price

    def is_on_promotion(self, purchasable: Purchasable) -> bool:
        return self.resolve(purchasable).on_promotion
