"""End-to-end tests of the click commands against a temp data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli import main


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_DEFAULT_STORE_ID", raising=False)
    monkeypatch.setattr(main, "setup_logging", lambda settings, verbose=False: None)
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(main.cli, list(args))

    return _run


def _add_widget(run, stock="5"):
    return run(
        "purchasable", "add", "--sku", "WIDGET", "--description", "Widget",
        "--price", "10.00", "--stock", stock,
    )


def test_add_and_list_purchasables(run):
    result = _add_widget(run)
    assert result.exit_code == 0, result.output
    assert "Purchasable #1 'Widget' added at $10.00" in result.output

    listing = run("purchasable", "list")
    assert listing.exit_code == 0
    assert "WIDGET" in listing.output
    assert "yes" in listing.output


def test_empty_catalog(run):
    result = run("purchasable", "list")
    assert result.exit_code == 0
    assert "No purchasables found." in result.output


def test_duplicate_sku_fails(run):
    _add_widget(run)
    result = _add_widget(run)
    assert result.exit_code != 0
    assert "SKU 'WIDGET' already exists" in result.output


def test_order_lifecycle(run):
    _add_widget(run)

    created = run("order", "create")
    assert "Order #1 created  (state=OPEN)" in created.output

    added = run("order", "add", "--id", "1", "--sku", "WIDGET", "--qty", "9")
    assert added.exit_code == 0, added.output
    assert "Notice: Widget only has 5 in stock." in added.output

    completed = run("order", "complete", "--id", "1")
    assert completed.exit_code == 0, completed.output
    assert "Order #1 completed." in completed.output

    shown = run("order", "show", "--id", "1")
    assert "state=COMPLETED" in shown.output
    assert "$50.00" in shown.output

    listing = run("purchasable", "list")
    assert "no" in listing.output.splitlines()[-1]


def test_refresh_reports_price_change(run):
    _add_widget(run)
    run("order", "create")
    run("order", "add", "--id", "1", "--sku", "WIDGET", "--qty", "2")
    run("purchasable", "update", "--id", "1", "--price", "12.00")

    result = run("order", "refresh", "--id", "1")
    assert result.exit_code == 0, result.output
    assert "Notice: The price of Widget changed from $10.00 to $12.00." in result.output


def test_refresh_keep_missing_reports_error(run):
    _add_widget(run)
    run("order", "create")
    run("order", "add", "--id", "1", "--sku", "WIDGET", "--qty", "1")
    run("purchasable", "delete", "--id", "1")

    result = run("order", "refresh", "--id", "1", "--keep-missing")
    assert "Error: No purchasable available." in result.output


def test_quantity_above_maximum_is_rejected(run):
    _add_widget(run)
    run("purchasable", "update", "--id", "1", "--max-qty", "2")
    run("order", "create")

    result = run("order", "add", "--id", "1", "--sku", "WIDGET", "--qty", "3")
    assert result.exit_code != 0
    assert "Maximum order quantity for this item is 2." in result.output


def test_unknown_order(run):
    result = run("order", "show", "--id", "42")
    assert result.exit_code != 0
    assert "Order #42 not found" in result.output


def test_temporary_sku_replaced_then_sold(run):
    run(
        "purchasable", "add", "--description", "Gadget", "--price", "4.00",
        "--stock", "3", "--tax-category", "1", "--shipping-category", "1",
    )
    run("order", "create")
    blocked = run("order", "add", "--id", "1", "--sku", "GADGET", "--qty", "1")
    assert blocked.exit_code != 0

    updated = run("purchasable", "update", "--id", "1", "--sku", "GADGET")
    assert updated.exit_code == 0, updated.output
    assert "Purchasable #1 updated." in updated.output
    assert "not available" not in updated.output

    added = run("order", "add", "--id", "1", "--sku", "GADGET", "--qty", "1")
    assert added.exit_code == 0, added.output


def test_update_rejects_unknown_shipping_category(run):
    _add_widget(run)
    result = run("purchasable", "update", "--id", "1", "--shipping-category", "7")
    assert result.exit_code != 0
    assert "Shipping category #7 not found" in result.output
