"""Unit tests for the CategoryResolver domain service."""

import pytest

from storefront.domain.exceptions import ConfigurationError
from storefront.domain.model.catalog import ShippingCategory, Store, TaxCategory
from storefront.domain.service.category_resolver import CategoryResolver
from tests.fakes import FakeCatalogRepository, make_purchasable


def _catalog() -> FakeCatalogRepository:
    return FakeCatalogRepository(
        stores=[
            Store(id=1, handle="primary", name="Primary", primary=True),
            Store(id=2, handle="eu", name="EU"),
        ],
        tax_categories=[
            TaxCategory(id=1, handle="general", name="General", default=True),
            TaxCategory(id=2, handle="reduced", name="Reduced"),
        ],
        shipping_categories=[
            ShippingCategory(id=1, handle="general", name="General", store_id=1, default=True),
            ShippingCategory(id=2, handle="bulky", name="Bulky", store_id=1),
            ShippingCategory(id=3, handle="general", name="General", store_id=2, default=True),
        ],
    )


class TestTaxCategory:

    def test_explicit_category(self):
        p = make_purchasable(tax_category_id=2)
        assert CategoryResolver(_catalog()).tax_category_for(p).handle == "reduced"

    def test_falls_back_to_default(self):
        assert CategoryResolver(_catalog()).tax_category_for(make_purchasable()).id == 1

    def test_unknown_category(self):
        with pytest.raises(ConfigurationError, match="Tax category #99 not found"):
            CategoryResolver(_catalog()).tax_category_for(make_purchasable(tax_category_id=99))

    def test_no_default(self):
        resolver = CategoryResolver(FakeCatalogRepository(tax_categories=[]))
        with pytest.raises(ConfigurationError, match="No default tax category"):
            resolver.tax_category_for(make_purchasable())


class TestShippingCategory:

    def test_explicit_category(self):
        p = make_purchasable(shipping_category_id=2)
        assert CategoryResolver(_catalog()).shipping_category_for(p).handle == "bulky"

    def test_default_is_per_store(self):
        p = make_purchasable(store_id=2)
        assert CategoryResolver(_catalog()).shipping_category_for(p).id == 3

    def test_category_of_another_store(self):
        p = make_purchasable(store_id=2, shipping_category_id=2)
        with pytest.raises(ConfigurationError, match="not found in store 'eu'"):
            CategoryResolver(_catalog()).shipping_category_for(p)

    def test_unknown_store(self):
        with pytest.raises(ConfigurationError, match="Unable to retrieve store #7"):
            CategoryResolver(_catalog()).shipping_category_for(make_purchasable(store_id=7))
