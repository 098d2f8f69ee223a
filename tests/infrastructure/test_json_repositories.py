"""Tests for the JSON-file-backed repositories, against a temp directory."""

import json
from decimal import Decimal

from storefront.domain.model.notice import Notice, NoticeType
from storefront.domain.model.order import LineItem, Order, OrderState
from storefront.domain.model.purchasable import PurchasableStatus
from storefront.domain.model.value_objects import Dimensions, Money
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_purchasable_repository import (
    JsonPurchasableRepository,
)
from tests.fakes import make_purchasable


class TestJsonPurchasableRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonPurchasableRepository(tmp_path / "purchasables.json")
        repo.save(
            make_purchasable(
                base_promotional_price=Money.of("8.00"),
                dimensions=Dimensions.of(weight="1.5", width="2"),
                min_qty=2,
                max_qty=0,
                status=PurchasableStatus.DISABLED,
            )
        )

        loaded = repo.get_by_id(1, 1)
        assert loaded.sku == "WIDGET"
        assert loaded.base_price == Money.of("10.00")
        assert loaded.base_promotional_price == Money.of("8.00")
        assert loaded.dimensions.weight == Decimal("1.5")
        assert loaded.dimensions.height is None
        assert (loaded.min_qty, loaded.max_qty) == (2, 0)
        assert loaded.status == PurchasableStatus.DISABLED
        assert loaded.stock == 10

    def test_sku_lookup_ignores_case(self, tmp_path):
        repo = JsonPurchasableRepository(tmp_path / "purchasables.json")
        repo.save(make_purchasable())
        assert repo.get_by_sku("widget", 1).id == 1
        assert repo.get_by_sku("gadget", 1) is None

    def test_store_rows_are_separate(self, tmp_path):
        repo = JsonPurchasableRepository(tmp_path / "purchasables.json")
        repo.save(make_purchasable(store_id=1, stock=10))
        repo.save(make_purchasable(store_id=2, stock=3, base_price=Money.of("12.00")))

        assert repo.get_by_id(1, 1).stock == 10
        assert repo.get_by_id(1, 2).stock == 3
        assert repo.get_by_id(1, 2).base_price == Money.of("12.00")

    def test_unstocked_store_is_unavailable(self, tmp_path):
        repo = JsonPurchasableRepository(tmp_path / "purchasables.json")
        repo.save(make_purchasable(store_id=1))

        elsewhere = repo.get_by_id(1, 3)
        assert elsewhere.base_price is None
        assert elsewhere.stock == 0
        assert not elsewhere.available_for_purchase

    def test_delete_removes_every_store_row(self, tmp_path):
        path = tmp_path / "purchasables.json"
        repo = JsonPurchasableRepository(path)
        repo.save(make_purchasable(store_id=1))
        repo.save(make_purchasable(store_id=2))

        repo.delete(repo.get_by_id(1, 1))

        assert repo.get_by_id(1, 1) is None
        assert json.loads(path.read_text()) == {"purchasables": [], "purchasable_stores": []}

    def test_next_id(self, tmp_path):
        repo = JsonPurchasableRepository(tmp_path / "purchasables.json")
        assert repo.next_id() == 1
        repo.save(make_purchasable(id=None))
        assert repo.next_id() == 2


class TestJsonOrderRepository:

    def test_assigns_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first = Order(id=None, store_id=1, items=[LineItem(id=None, purchasable_id=1, qty=1)])
        second = Order(
            id=None,
            store_id=1,
            items=[
                LineItem(id=None, purchasable_id=1, qty=1),
                LineItem(id=None, purchasable_id=2, qty=1),
            ],
        )
        repo.save(first)
        repo.save(second)

        assert (first.id, second.id) == (1, 2)
        assert [item.id for item in repo.line_items_for(2)] == [2, 3]

    def test_removed_line_item_id_is_not_reused(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(
            id=None,
            store_id=1,
            items=[
                LineItem(id=None, purchasable_id=1, qty=1),
                LineItem(id=None, purchasable_id=2, qty=1),
            ],
        )
        repo.save(order)
        removed = order.find_line_item(2)
        order.remove_line_item(removed)
        repo.save(order)

        order.add_line_item(LineItem(id=None, purchasable_id=3, qty=1))
        repo.save(order)

        assert [item.id for item in repo.line_items_for(order.id)] == [1, 3]

    def test_pending_notice_points_at_saved_line_item(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(id=None, store_id=1)
        item = LineItem(id=None, purchasable_id=4, qty=2)
        order.add_line_item(item)
        order.add_notice(
            Notice(NoticeType.QUANTITY_CHANGED, item.field_path("qty"), "Widget only has 2 in stock.")
        )
        repo.save(order)

        assert repo.get_by_id(order.id).notices[0].attribute == f"lineItems.{item.id}.qty"

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(
            id=None,
            store_id=1,
            items=[
                LineItem(
                    id=None,
                    purchasable_id=1,
                    qty=3,
                    price=Money.of("10.00"),
                    promotional_price=Money.of("8.00"),
                    description="Widget",
                    sku="WIDGET",
                    weight=Decimal("1.5"),
                    tax_category_id=1,
                )
            ],
        )
        order.add_notice(
            Notice(NoticeType.QUANTITY_CHANGED, "lineItems.1.qty", "Widget only has 3 in stock.")
        )
        order.complete()
        repo.save(order)

        loaded = repo.get_by_id(order.id)
        item = loaded.items[0]
        assert loaded.state == OrderState.COMPLETED
        assert loaded.completed_at is not None
        assert item.sale_price == Money.of("8.00")
        assert item.weight == Decimal("1.5")
        assert item.width == Decimal("0")
        assert item.order is loaded
        assert loaded.notices[0].type == NoticeType.QUANTITY_CHANGED
        assert loaded.notices[0].message == "Widget only has 3 in stock."

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(id=None, store_id=1)
        repo.save(order)
        order.add_line_item(LineItem(id=None, purchasable_id=1, qty=2))
        repo.save(order)

        assert repo.next_id() == 2
        assert repo.get_by_id(order.id).total_qty == 2

    def test_missing_order(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        assert repo.get_by_id(7) is None
        assert repo.line_items_for(7) == []


class TestJsonCatalogRepository:

    def test_seeds_default_catalog(self, tmp_path):
        repo = JsonCatalogRepository(tmp_path / "catalog.json")

        assert repo.primary_store().id == 1
        assert repo.default_tax_category().handle == "general"
        assert repo.default_shipping_category(1).id == 1
        assert repo.default_shipping_category(2) is None

    def test_existing_file_is_not_overwritten(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "stores": [
                        {"id": 1, "handle": "us", "name": "US", "primary": False},
                        {"id": 2, "handle": "eu", "name": "EU", "primary": True},
                    ],
                    "tax_categories": [],
                    "shipping_categories": [
                        {"id": 4, "handle": "bulky", "name": "Bulky", "store_id": 2},
                    ],
                }
            )
        )
        repo = JsonCatalogRepository(path)

        assert repo.primary_store().handle == "eu"
        assert repo.get_store(1).handle == "us"
        assert repo.get_store(9) is None
        assert repo.default_tax_category() is None
        assert repo.get_shipping_category(4, 2).handle == "bulky"
        assert repo.get_shipping_category(4, 1) is None
