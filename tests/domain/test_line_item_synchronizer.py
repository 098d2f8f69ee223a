"""Unit tests for the LineItemSynchronizer domain service."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ConfigurationError
from storefront.domain.model.notice import NoticeType
from storefront.domain.model.order import LineItem, Order
from storefront.domain.model.validation import ErrorCode
from storefront.domain.model.value_objects import Dimensions, Money
from storefront.domain.service.category_resolver import CategoryResolver
from storefront.domain.service.line_item_synchronizer import LineItemSynchronizer
from storefront.domain.service.price_resolver import ResolvedPrice
from tests.fakes import FakeCatalogRepository, make_purchasable


def _open_order_with(qty: int, item_id: int | None = 1) -> tuple[Order, LineItem]:
    item = LineItem(id=item_id, purchasable_id=1, qty=qty)
    order = Order(id=1, store_id=1, items=[item])
    return order, item


class TestPopulateQuantityClamp:

    def test_clamps_to_stock_with_one_notice(self):
        order, item = _open_order_with(qty=5)
        p = make_purchasable(stock=3)

        notices = LineItemSynchronizer().populate(item, p)

        assert item.qty == 3
        assert len(notices) == 1
        notice = notices[0]
        assert notice.type == NoticeType.QUANTITY_CHANGED
        assert notice.attribute == "lineItems.1.qty"
        assert notice.message == "Widget only has 3 in stock."
        assert order.notices == notices

    def test_populate_is_idempotent(self):
        order, item = _open_order_with(qty=5)
        p = make_purchasable(stock=3)
        sync = LineItemSynchronizer()

        sync.populate(item, p)
        snapshot = (item.qty, item.weight, item.width, item.description, item.sku)
        second = sync.populate(item, p)

        assert second == []
        assert (item.qty, item.weight, item.width, item.description, item.sku) == snapshot
        assert len(order.notices) == 1

    def test_no_clamp_within_stock(self):
        order, item = _open_order_with(qty=3)
        assert LineItemSynchronizer().populate(item, make_purchasable(stock=3)) == []
        assert item.qty == 3
        assert order.notices == []

    def test_no_clamp_for_unlimited_stock(self):
        _, item = _open_order_with(qty=50)
        p = make_purchasable(stock=1, has_unlimited_stock=True)
        assert LineItemSynchronizer().populate(item, p) == []
        assert item.qty == 50

    def test_no_clamp_without_order(self):
        item = LineItem(id=None, purchasable_id=1, qty=5)
        assert LineItemSynchronizer().populate(item, make_purchasable(stock=3)) == []
        assert item.qty == 5

    def test_no_clamp_on_completed_order(self):
        order, item = _open_order_with(qty=5)
        order.complete()
        assert LineItemSynchronizer().populate(item, make_purchasable(stock=3)) == []
        assert item.qty == 5

    def test_clamp_message_uses_existing_description(self):
        _, item = _open_order_with(qty=5)
        item.description = "Blue widget (L)"
        [notice] = LineItemSynchronizer().populate(item, make_purchasable(stock=2))
        assert notice.message == "Blue widget (L) only has 2 in stock."


class TestPopulateAttributes:

    def test_copies_dimensions_with_zero_for_unset(self):
        _, item = _open_order_with(qty=1)
        p = make_purchasable(dimensions=Dimensions.of(weight="2.5", height="10"))

        LineItemSynchronizer().populate(item, p)

        assert item.weight == Decimal("2.5")
        assert item.height == Decimal("10")
        assert item.length == Decimal("0")
        assert item.width == Decimal("0")

    def test_does_not_touch_price(self):
        _, item = _open_order_with(qty=1)
        LineItemSynchronizer().populate(item, make_purchasable())
        assert item.price is None
        assert item.promotional_price is None

    def test_snapshots_sku_and_description(self):
        _, item = _open_order_with(qty=1)
        LineItemSynchronizer().populate(item, make_purchasable(sku="W-1", description="Widget"))
        assert item.sku == "W-1"
        assert item.description == "Widget"

    def test_resolves_categories_when_resolver_given(self):
        _, item = _open_order_with(qty=1)
        sync = LineItemSynchronizer(category_resolver=CategoryResolver(FakeCatalogRepository()))
        sync.populate(item, make_purchasable())
        assert item.tax_category_id == 1
        assert item.shipping_category_id == 1


class TestApplyPrice:

    def test_first_pricing_emits_no_notice(self):
        order, item = _open_order_with(qty=1)
        resolved = ResolvedPrice(Money.of("10"), Money.of("8"))

        assert LineItemSynchronizer().apply_price(item, resolved) == []
        assert item.price == Money.of("10")
        assert item.promotional_price == Money.of("8")
        assert order.notices == []

    def test_changed_sale_price_emits_notice(self):
        order, item = _open_order_with(qty=1)
        item.description = "Widget"
        item.price = Money.of("10")

        [notice] = LineItemSynchronizer().apply_price(item, ResolvedPrice(Money.of("12")))

        assert notice.type == NoticeType.SALE_PRICE_CHANGED
        assert notice.attribute == "lineItems.1.salePrice"
        assert notice.message == "The price of Widget changed from $10.00 to $12.00."
        assert order.notices == [notice]

    def test_same_sale_price_emits_no_notice(self):
        _, item = _open_order_with(qty=1)
        item.price = Money.of("10")
        item.promotional_price = Money.of("8")
        resolved = ResolvedPrice(Money.of("9"), Money.of("8"))
        assert LineItemSynchronizer().apply_price(item, resolved) == []
        assert item.price == Money.of("9")

    def test_completed_order_keeps_historical_price(self):
        order, item = _open_order_with(qty=1)
        item.price = Money.of("10")
        order.complete()
        assert LineItemSynchronizer().apply_price(item, ResolvedPrice(Money.of("12"))) == []
        assert item.price == Money.of("10")


class TestPopulateAndValidate:

    def test_happy_path(self):
        _, item = _open_order_with(qty=2)
        p = make_purchasable(base_price=Money.of("10"), base_promotional_price=Money.of("7"))

        result = LineItemSynchronizer().populate_and_validate(item, p)

        assert result.ok
        assert result.notices == []
        assert item.sale_price == Money.of("7")
        assert item.subtotal == Money.of("14")

    def test_clamp_then_validation_passes(self):
        _, item = _open_order_with(qty=5)
        result = LineItemSynchronizer().populate_and_validate(item, make_purchasable(stock=3))
        assert result.ok
        assert [n.type for n in result.notices] == [NoticeType.QUANTITY_CHANGED]
        assert item.qty == 3

    def test_clamp_proceeds_even_when_other_rules_fail(self):
        _, item = _open_order_with(qty=5)
        p = make_purchasable(stock=3, min_qty=4)

        result = LineItemSynchronizer().populate_and_validate(item, p)

        assert item.qty == 3
        assert len(result.notices) == 1
        assert [e.code for e in result.errors] == [ErrorCode.BELOW_MINIMUM]

    def test_missing_purchasable(self):
        _, item = _open_order_with(qty=1)
        result = LineItemSynchronizer().populate_and_validate(item, None)
        assert [e.code for e in result.errors] == [ErrorCode.PURCHASABLE_MISSING]
        assert result.notices == []

    def test_completed_order_is_untouched(self):
        order, item = _open_order_with(qty=5)
        order.complete()
        result = LineItemSynchronizer().populate_and_validate(item, make_purchasable(stock=0))
        assert result.ok
        assert item.qty == 5

    def test_unpriced_purchasable_raises(self):
        _, item = _open_order_with(qty=1)
        with pytest.raises(ConfigurationError):
            LineItemSynchronizer().populate_and_validate(item, make_purchasable(base_price=None))
