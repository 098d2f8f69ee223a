"""SKU helpers.

A purchasable that has not been given a real SKU yet carries a
temporary placeholder so it can be saved; such a purchasable is never
available for purchase.
"""

from __future__ import annotations

import secrets

TEMPORARY_SKU_PREFIX = "__temp_"


def is_temp_sku(sku: str | None) -> bool:
    return bool(sku) and sku.startswith(TEMPORARY_SKU_PREFIX)


def temp_sku() -> str:
    """Generate a fresh placeholder SKU."""
    return TEMPORARY_SKU_PREFIX + secrets.token_hex(8)
